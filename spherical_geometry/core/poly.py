"""
Polygon and polyline predicates on the sphere.

Point-in-polygon, point-near-edge/path and point-to-segment distance.
Segments are great-circle arcs when ``geodesic`` is true and rhumb lines
(constant heading, straight in Mercator space) otherwise.

Polygons are always treated as closed, whether or not the last point repeats
the first. Polylines are never closed. Neither is copied or mutated.
"""
import math
from typing import Any, Sequence

from spherical_geometry.core.latlng import COORDINATE_EPSILON, LatLng, as_latlng
from spherical_geometry.core.mathutil import (
    EARTH_RADIUS,
    clamp,
    deg2rad,
    hav,
    hav_distance,
    hav_from_sin,
    inverse_mercator,
    mercator,
    sin_from_hav,
    sin_sum_from_hav,
    wrap,
)
from spherical_geometry.core.spherical import compute_distance_between
from spherical_geometry.utils.error_handling import handle_empty_path


# Default proximity tolerance in meters
DEFAULT_TOLERANCE = 0.1

# Above this hav(segment length) the along-track check is needed;
# shorter segments are accepted once the cross-track test passes.
_LONG_SEGMENT_HAV = 0.74


@handle_empty_path(return_value=False, path_param="polygon")
def contains_location(point: Any, polygon: Sequence[Any], geodesic: bool = False) -> bool:
    """
    Whether a point lies inside a polygon.

    Counts crossings between the polygon edges and the meridian segment from
    the point down to the South Pole; an odd count means inside. Inside is
    the region not containing the South Pole, so the South Pole itself is
    always outside. A point equal to a vertex is inside.

    Args:
        point: Query point
        polygon: Polygon vertices (implicitly closed)
        geodesic: Great-circle edges if True, rhumb edges otherwise

    Returns:
        True if the point is inside the polygon

    Example:
        >>> triangle = [(0, 0), (10, 12), (20, 5)]
        >>> contains_location((10, 11), triangle)
        True
        >>> contains_location((30, 5), triangle)
        False
    """
    point = as_latlng(point)
    lat3 = deg2rad(point.lat)
    lng3 = deg2rad(point.lng)

    prev = as_latlng(polygon[-1])
    lat1 = deg2rad(prev.lat)
    lng1 = deg2rad(prev.lng)

    n_intersect = 0
    for vertex in polygon:
        vertex = as_latlng(vertex)

        if _is_vertex(point, prev):
            return True

        d_lng3 = wrap(lng3 - lng1, -math.pi, math.pi)
        lat2 = deg2rad(vertex.lat)
        lng2 = deg2rad(vertex.lng)

        # Offset longitudes by -lng1
        if intersects(lat1, lat2, wrap(lng2 - lng1, -math.pi, math.pi), lat3, d_lng3, geodesic):
            n_intersect += 1

        prev = vertex
        lat1 = lat2
        lng1 = lng2

    return (n_intersect & 1) != 0


def is_location_on_edge(point: Any, polygon: Sequence[Any],
                        tolerance: float = DEFAULT_TOLERANCE, geodesic: bool = True) -> bool:
    """
    Whether a point lies on or near the edge of a polygon.

    The closing segment between the last and first vertex is included.

    Args:
        point: Query point
        polygon: Polygon vertices
        tolerance: Maximum distance from the edge (meters)
        geodesic: Great-circle edges if True, rhumb edges otherwise
    """
    return is_location_on_edge_or_path(point, polygon, True, geodesic, tolerance)


def is_location_on_path(point: Any, polyline: Sequence[Any],
                        tolerance: float = DEFAULT_TOLERANCE, geodesic: bool = True) -> bool:
    """
    Whether a point lies on or near a polyline.

    The polyline is open: there is no segment from the last point back to
    the first.

    Args:
        point: Query point
        polyline: Path points
        tolerance: Maximum distance from the path (meters)
        geodesic: Great-circle segments if True, rhumb segments otherwise

    Example:
        >>> equator = [(0, 90), (0, 180)]
        >>> is_location_on_path((0, 135), equator)
        True
        >>> is_location_on_path((0.001, 135), equator)
        False
    """
    return is_location_on_edge_or_path(point, polyline, False, geodesic, tolerance)


def is_location_on_edge_or_path(point: Any, poly: Sequence[Any], closed: bool,
                                geodesic: bool, tolerance: float) -> bool:
    """Shared implementation of is_location_on_edge and is_location_on_path."""
    return location_index_on_edge_or_path(point, poly, closed, geodesic, tolerance) >= 0


def location_index_on_edge(point: Any, polygon: Sequence[Any],
                           tolerance: float = DEFAULT_TOLERANCE, geodesic: bool = True) -> int:
    """
    Index of the polygon edge a point lies on, or -1.

    Index i means the edge from polygon[i] to polygon[i + 1]; a point on the
    closing edge (last vertex back to the first) reports 0.
    """
    return location_index_on_edge_or_path(point, polygon, True, geodesic, tolerance)


def location_index_on_path(point: Any, polyline: Sequence[Any],
                           tolerance: float = DEFAULT_TOLERANCE, geodesic: bool = True) -> int:
    """
    Index of the polyline segment a point lies on, or -1.

    Index i means the segment from polyline[i] to polyline[i + 1]. When the
    point is near several segments the first one wins.

    Example:
        >>> path = [(0, 0), (0, 10), (10, 10)]
        >>> location_index_on_path((5, 10), path)
        1
        >>> location_index_on_path((5, 5), path)
        -1
    """
    return location_index_on_edge_or_path(point, polyline, False, geodesic, tolerance)


@handle_empty_path(return_value=-1, path_param="poly")
def location_index_on_edge_or_path(point: Any, poly: Sequence[Any], closed: bool,
                                   geodesic: bool, tolerance: float) -> int:
    """
    Where a point lies on or near a polyline, within a tolerance.

    Args:
        point: Query point
        poly: Polyline or polygon vertices
        closed: Include the segment from the last point back to the first
        geodesic: Great-circle segments if True, rhumb segments otherwise
        tolerance: Maximum distance (meters)

    Returns:
        -1 if the point is not on or near the polyline;
        0 if it is between poly[0] and poly[1] (inclusive),
        1 if between poly[1] and poly[2],
        ...,
        len(poly) - 2 if between poly[-2] and poly[-1]
    """
    size = len(poly)

    tolerance = tolerance / EARTH_RADIUS
    hav_tolerance = hav(tolerance)

    point = as_latlng(point)
    lat3 = deg2rad(point.lat)
    lng3 = deg2rad(point.lng)

    prev = as_latlng(poly[size - 1 if closed else 0])
    lat1 = deg2rad(prev.lat)
    lng1 = deg2rad(prev.lng)

    idx = 0
    if geodesic:
        for vertex in poly:
            vertex = as_latlng(vertex)
            lat2 = deg2rad(vertex.lat)
            lng2 = deg2rad(vertex.lng)
            if is_on_segment_gc(lat1, lng1, lat2, lng2, lat3, lng3, hav_tolerance):
                return max(0, idx - 1)
            lat1 = lat2
            lng1 = lng2
            idx += 1
        return -1

    # Rhumb segments are straight in Mercator space. The closest point is
    # taken in that space, which is not the closest point on the sphere,
    # but the error is small because the tolerance is small.
    min_acceptable = lat3 - tolerance
    max_acceptable = lat3 + tolerance
    y1 = mercator(lat1)
    y3 = mercator(lat3)
    for vertex in poly:
        vertex = as_latlng(vertex)
        lat2 = deg2rad(vertex.lat)
        y2 = mercator(lat2)
        lng2 = deg2rad(vertex.lng)
        if max(lat1, lat2) >= min_acceptable and min(lat1, lat2) <= max_acceptable:
            # Longitudes offset by -lng1; the implicit x1 is 0.
            x2 = wrap(lng2 - lng1, -math.pi, math.pi)
            x3_base = wrap(lng3 - lng1, -math.pi, math.pi)
            # Also try x3 wrapped around the world in both directions
            for x3 in (x3_base, x3_base + 2 * math.pi, x3_base - 2 * math.pi):
                dy = y2 - y1
                len2 = x2 * x2 + dy * dy
                t = 0.0 if len2 <= 0 else clamp((x3 * x2 + (y3 - y1) * dy) / len2, 0.0, 1.0)
                x_closest = t * x2
                y_closest = y1 + t * dy
                lat_closest = inverse_mercator(y_closest)
                hav_dist = hav_distance(lat3, lat_closest, x3 - x_closest)
                if hav_dist < hav_tolerance:
                    return max(0, idx - 1)
        lat1 = lat2
        lng1 = lng2
        y1 = y2
        idx += 1
    return -1


def distance_to_line(point: Any, start: Any, end: Any) -> float:
    """
    Distance from a point to the segment start-end, in meters.

    The foot of the perpendicular is found in plain latitude/longitude space,
    which is accurate for segments short relative to Earth's radius; the
    returned distance is then measured on the sphere.

    Args:
        point: Point to measure from
        start: Beginning of the segment
        end: End of the segment

    Returns:
        Distance in meters

    Example:
        >>> d = distance_to_line((28.05342, -82.41594), (28.05359, -82.41632), (28.05310, -82.41634))
        >>> print(f"{d:.2f} m")
        37.95 m
    """
    point = as_latlng(point)
    start = as_latlng(start)
    end = as_latlng(end)

    if start == end:
        return compute_distance_between(end, point)

    s0lat = deg2rad(point.lat)
    s0lng = deg2rad(point.lng)
    s1lat = deg2rad(start.lat)
    s1lng = deg2rad(start.lng)
    s2lat = deg2rad(end.lat)
    s2lng = deg2rad(end.lng)

    s2s1lat = s2lat - s1lat
    s2s1lng = s2lng - s1lng
    u = ((s0lat - s1lat) * s2s1lat + (s0lng - s1lng) * s2s1lng) \
        / (s2s1lat * s2s1lat + s2s1lng * s2s1lng)
    if u <= 0:
        return compute_distance_between(point, start)
    if u >= 1:
        return compute_distance_between(point, end)

    su = LatLng(start.lat + u * (end.lat - start.lat), start.lng + u * (end.lng - start.lng))
    return compute_distance_between(point, su)


def intersects(lat1: float, lat2: float, lng2: float,
               lat3: float, lng3: float, geodesic: bool) -> bool:
    """
    Whether the meridian segment from (lat3, lng3) down to the South Pole
    crosses the segment (lat1, 0) to (lat2, lng2).

    Longitudes are offset by -lng1, so the first endpoint sits at 0.
    All arguments are in radians.
    """
    # Both ends on the same side of lng3
    if (lng3 >= 0 and lng3 >= lng2) or (lng3 < 0 and lng3 < lng2):
        return False
    # Point is the South Pole
    if lat3 <= -math.pi / 2:
        return False
    # Any segment end is a pole
    if lat1 <= -math.pi / 2 or lat2 <= -math.pi / 2 or lat1 >= math.pi / 2 or lat2 >= math.pi / 2:
        return False
    if lng2 <= -math.pi:
        return False

    linear_lat = (lat1 * (lng2 - lng3) + lat2 * lng3) / lng2
    # Northern hemisphere and point under lat-lng line
    if lat1 >= 0 and lat2 >= 0 and lat3 < linear_lat:
        return False
    # Southern hemisphere and point above lat-lng line
    if lat1 <= 0 and lat2 <= 0 and lat3 >= linear_lat:
        return True
    # North Pole
    if lat3 >= math.pi / 2:
        return True

    # Compare lat3 with the segment latitude at lng3, through a strictly
    # increasing function of latitude.
    if geodesic:
        return math.tan(lat3) >= _tan_lat_gc(lat1, lat2, lng2, lng3)
    return mercator(lat3) >= _mercator_lat_rhumb(lat1, lat2, lng2, lng3)


def is_on_segment_gc(lat1: float, lng1: float, lat2: float, lng2: float,
                     lat3: float, lng3: float, hav_tolerance: float) -> bool:
    """
    Whether (lat3, lng3) is within tolerance of the great-circle segment
    (lat1, lng1) to (lat2, lng2).

    Args:
        lat1, lng1: First endpoint (radians)
        lat2, lng2: Second endpoint (radians)
        lat3, lng3: Query point (radians)
        hav_tolerance: hav() of the angular tolerance

    Returns:
        True if both the cross-track and along-track conditions hold
    """
    hav_dist13 = hav_distance(lat1, lat3, lng1 - lng3)
    if hav_dist13 <= hav_tolerance:
        return True
    hav_dist23 = hav_distance(lat2, lat3, lng2 - lng3)
    if hav_dist23 <= hav_tolerance:
        return True

    sin_bearing = _sin_delta_bearing(lat1, lng1, lat2, lng2, lat3, lng3)
    sin_dist13 = sin_from_hav(hav_dist13)
    hav_cross_track = hav_from_sin(sin_dist13 * sin_bearing)
    if hav_cross_track > hav_tolerance:
        return False

    hav_dist12 = hav_distance(lat1, lat2, lng1 - lng2)
    term = hav_dist12 + hav_cross_track * (1 - 2 * hav_dist12)
    if hav_dist13 > term or hav_dist23 > term:
        return False
    if hav_dist12 < _LONG_SEGMENT_HAV:
        return True

    cos_cross_track = 1 - 2 * hav_cross_track
    hav_along_track13 = (hav_dist13 - hav_cross_track) / cos_cross_track
    hav_along_track23 = (hav_dist23 - hav_cross_track) / cos_cross_track
    sin_sum_along_track = sin_sum_from_hav(hav_along_track13, hav_along_track23)
    # Along-track sum below a half circle (pi) <=> positive sine
    return sin_sum_along_track > 0


def _is_vertex(point: LatLng, vertex: LatLng) -> bool:
    # Longitudes compared modulo 360 so that -180 and 180 coincide
    return (abs(point.lat - vertex.lat) < COORDINATE_EPSILON
            and abs(wrap(point.lng - vertex.lng, -180.0, 180.0)) < COORDINATE_EPSILON)


def _tan_lat_gc(lat1: float, lat2: float, lng2: float, lng3: float) -> float:
    # tan(latitude at lng3) on the great circle (lat1, 0) to (lat2, lng2)
    return (math.tan(lat1) * math.sin(lng2 - lng3) + math.tan(lat2) * math.sin(lng3)) / math.sin(lng2)


def _mercator_lat_rhumb(lat1: float, lat2: float, lng2: float, lng3: float) -> float:
    # mercator(latitude at lng3) on the rhumb line (lat1, 0) to (lat2, lng2)
    return (mercator(lat1) * (lng2 - lng3) + mercator(lat2) * lng3) / lng2


def _sin_delta_bearing(lat1: float, lng1: float, lat2: float, lng2: float,
                       lat3: float, lng3: float) -> float:
    # sin(bearing 1->3 minus bearing 1->2)
    sin_lat1 = math.sin(lat1)
    cos_lat2 = math.cos(lat2)
    cos_lat3 = math.cos(lat3)
    lat31 = lat3 - lat1
    lng31 = lng3 - lng1
    lat21 = lat2 - lat1
    lng21 = lng2 - lng1
    a = math.sin(lng31) * cos_lat3
    c = math.sin(lng21) * cos_lat2
    b = math.sin(lat31) + 2 * sin_lat1 * cos_lat3 * hav(lng31)
    d = math.sin(lat21) + 2 * sin_lat1 * cos_lat2 * hav(lng21)
    denom = (a * a + b * b) * (c * c + d * d)
    return 1.0 if denom <= 0 else (a * d - b * c) / math.sqrt(denom)

"""
Great-circle computations on pairs and sequences of points.

Distances, headings, offsets, interpolation, path length and polygon area on
a sphere. Points are LatLng values (or anything as_latlng accepts); headings
are degrees clockwise from north; distances are meters on a sphere of the
given radius (Earth's mean radius by default).

References:
    http://williams.best.vwh.net/avform.htm
    https://en.wikipedia.org/wiki/Slerp
"""
import math
from typing import Any, Optional, Sequence

from spherical_geometry.core.latlng import LatLng, as_latlng
from spherical_geometry.core.mathutil import (
    EARTH_RADIUS,
    arc_hav,
    clamp,
    deg2rad,
    hav_distance,
    rad2deg,
    wrap,
)
from spherical_geometry.utils.logging_config import get_logger


# Below this sin(angle) the Slerp coefficients are unstable
SLERP_MIN_SIN_ANGLE = 1e-6


def compute_heading(from_point: Any, to_point: Any) -> float:
    """
    Initial heading from one point to another.

    Args:
        from_point: Starting point
        to_point: Destination point

    Returns:
        Heading in degrees clockwise from north, in [-180, 180)

    Example:
        >>> compute_heading(LatLng(0, 0), LatLng(0, 90))
        90.0

    Note:
        The heading from a pole is undefined; a wrapped number is returned
        but carries no meaning.
    """
    from_point = as_latlng(from_point)
    to_point = as_latlng(to_point)

    from_lat = deg2rad(from_point.lat)
    from_lng = deg2rad(from_point.lng)
    to_lat = deg2rad(to_point.lat)
    to_lng = deg2rad(to_point.lng)
    d_lng = to_lng - from_lng

    heading = math.atan2(
        math.sin(d_lng) * math.cos(to_lat),
        math.cos(from_lat) * math.sin(to_lat) - math.sin(from_lat) * math.cos(to_lat) * math.cos(d_lng)
    )

    return wrap(rad2deg(heading), -180.0, 180.0)


def compute_offset(from_point: Any, distance: float, heading: float,
                   radius: float = EARTH_RADIUS) -> LatLng:
    """
    Point reached by travelling a distance along a heading.

    Args:
        from_point: Starting point
        distance: Distance to travel (meters)
        heading: Heading in degrees clockwise from north
        radius: Sphere radius (meters)

    Returns:
        Destination point

    Example:
        >>> import math
        >>> dest = compute_offset(LatLng(0, 0), math.pi * EARTH_RADIUS / 2, 0)
        >>> round(dest.lat, 6)
        90.0
    """
    from_point = as_latlng(from_point)

    distance /= radius
    heading = deg2rad(heading)
    from_lat = deg2rad(from_point.lat)
    from_lng = deg2rad(from_point.lng)

    cos_distance = math.cos(distance)
    sin_distance = math.sin(distance)
    sin_from_lat = math.sin(from_lat)
    cos_from_lat = math.cos(from_lat)

    sin_lat = cos_distance * sin_from_lat + sin_distance * cos_from_lat * math.cos(heading)
    d_lng = math.atan2(
        sin_distance * cos_from_lat * math.sin(heading),
        cos_distance - sin_from_lat * sin_lat
    )

    return LatLng(rad2deg(math.asin(clamp(sin_lat, -1.0, 1.0))), rad2deg(from_lng + d_lng))


def compute_offset_origin(to_point: Any, distance: float, heading: float,
                          radius: float = EARTH_RADIUS) -> Optional[LatLng]:
    """
    Starting point given a destination, distance travelled and heading.

    The origin latitude is a root of a quadratic; the root with a latitude
    inside [-90, 90] is chosen.

    Args:
        to_point: Destination point
        distance: Distance travelled (meters)
        heading: Original heading in degrees clockwise from north
        radius: Sphere radius (meters)

    Returns:
        Origin point, or None when no origin exists (the distance does not
        fit on the sphere, or the path would have to pass over a pole)

    Example:
        >>> import math
        >>> origin = compute_offset_origin(LatLng(0, 45), math.pi * EARTH_RADIUS / 4, 90)
        >>> abs(origin.lat) < 1e-9 and abs(origin.lng) < 1e-9
        True

    References:
        http://lists.maptools.org/pipermail/proj/2008-October/003939.html
    """
    to_point = as_latlng(to_point)

    heading = deg2rad(heading)
    distance /= radius

    n1 = math.cos(distance)
    n2 = math.sin(distance) * math.cos(heading)
    n3 = math.sin(distance) * math.sin(heading)
    n4 = math.sin(deg2rad(to_point.lat))

    # Two solutions for b = n2 * n4 +/- sqrt(...). Try the first and fall
    # back to the second when the latitude leaves [-90, 90].
    n12 = n1 * n1
    discriminant = n2 * n2 * n12 + n12 * n12 - n12 * n4 * n4
    if discriminant < 0 or n1 == 0:
        get_logger(__name__).debug(
            "offset_origin_no_solution",
            discriminant=discriminant,
            distance_rad=distance,
        )
        return None

    b = n2 * n4 + math.sqrt(discriminant)
    b /= n1 * n1 + n2 * n2
    a = (n4 - n2 * b) / n1
    from_lat = math.atan2(a, b)
    if from_lat < -math.pi / 2 or from_lat > math.pi / 2:
        b = n2 * n4 - math.sqrt(discriminant)
        b /= n1 * n1 + n2 * n2
        from_lat = math.atan2(a, b)

    if from_lat < -math.pi / 2 or from_lat > math.pi / 2:
        get_logger(__name__).debug(
            "offset_origin_no_solution",
            latitude_rad=from_lat,
            distance_rad=distance,
        )
        return None

    from_lng = deg2rad(to_point.lng) - math.atan2(
        n3, n1 * math.cos(from_lat) - n2 * math.sin(from_lat)
    )
    return LatLng(rad2deg(from_lat), rad2deg(from_lng))


def interpolate(from_point: Any, to_point: Any, fraction: float) -> LatLng:
    """
    Point a fraction of the way along the great circle between two points.

    Args:
        from_point: Start of the arc (fraction 0)
        to_point: End of the arc (fraction 1)
        fraction: Fraction of the arc length to travel

    Returns:
        Interpolated point. For nearly coincident (or antipodal) endpoints,
        where sin(angle) < 1e-6, from_point is returned unchanged.

    Example:
        >>> p = interpolate(LatLng(0, 0), LatLng(90, 0), 1 / 90)
        >>> round(p.lat, 6)
        1.0
    """
    from_point = as_latlng(from_point)
    to_point = as_latlng(to_point)

    from_lat = deg2rad(from_point.lat)
    from_lng = deg2rad(from_point.lng)
    to_lat = deg2rad(to_point.lat)
    to_lng = deg2rad(to_point.lng)
    cos_from_lat = math.cos(from_lat)
    cos_to_lat = math.cos(to_lat)

    # Spherical interpolation coefficients
    angle = compute_angle_between(from_point, to_point)
    sin_angle = math.sin(angle)
    if sin_angle < SLERP_MIN_SIN_ANGLE:
        get_logger(__name__).debug("interpolate_fallback", angle=angle)
        return from_point

    a = math.sin((1 - fraction) * angle) / sin_angle
    b = math.sin(fraction * angle) / sin_angle

    # Polar to cartesian, interpolate, back to polar
    x = a * cos_from_lat * math.cos(from_lng) + b * cos_to_lat * math.cos(to_lng)
    y = a * cos_from_lat * math.sin(from_lng) + b * cos_to_lat * math.sin(to_lng)
    z = a * math.sin(from_lat) + b * math.sin(to_lat)

    lat = math.atan2(z, math.sqrt(x * x + y * y))
    lng = math.atan2(y, x)
    return LatLng(rad2deg(lat), rad2deg(lng))


def distance_radians(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance on the unit sphere; arguments in radians."""
    return arc_hav(hav_distance(lat1, lat2, lng1 - lng2))


def compute_angle_between(from_point: Any, to_point: Any) -> float:
    """
    Central angle between two points, in radians.

    Same as the distance on the unit sphere: 0 for equal points, pi for
    antipodal points.
    """
    from_point = as_latlng(from_point)
    to_point = as_latlng(to_point)
    return distance_radians(
        deg2rad(from_point.lat), deg2rad(from_point.lng),
        deg2rad(to_point.lat), deg2rad(to_point.lng)
    )


def compute_distance_between(from_point: Any, to_point: Any,
                             radius: float = EARTH_RADIUS) -> float:
    """
    Great-circle distance between two points.

    Args:
        from_point: First point
        to_point: Second point
        radius: Sphere radius (meters)

    Returns:
        Distance in meters

    Example:
        >>> # Distance from Dublin to Cork (Ireland)
        >>> d = compute_distance_between((53.3498, -6.2603), (51.8985, -8.4756))
        >>> print(f"{d / 1000:.1f} km")
        219.4 km
    """
    return compute_angle_between(from_point, to_point) * radius


def compute_length(path: Sequence[Any], radius: float = EARTH_RADIUS) -> float:
    """
    Length of a path (not closed), in meters.

    Returns 0 for paths with fewer than two points.
    """
    if len(path) < 2:
        return 0.0

    length = 0.0
    prev = as_latlng(path[0])
    prev_lat = deg2rad(prev.lat)
    prev_lng = deg2rad(prev.lng)
    for point in path:
        point = as_latlng(point)
        lat = deg2rad(point.lat)
        lng = deg2rad(point.lng)
        length += distance_radians(prev_lat, prev_lng, lat, lng)
        prev_lat = lat
        prev_lng = lng

    return length * radius


def compute_area(path: Sequence[Any], radius: float = EARTH_RADIUS) -> float:
    """
    Area of a closed path, in square meters.

    Independent of the winding direction.
    """
    return abs(compute_signed_area(path, radius))


def compute_signed_area(path: Sequence[Any], radius: float = EARTH_RADIUS) -> float:
    """
    Signed area of a closed path.

    "Inside" is the side that does not contain the South Pole; the sign
    flips with the winding direction. Paths with fewer than three points
    have zero area.

    Args:
        path: Closed path; repeating the first point at the end is optional
        radius: Sphere radius, the area is in the same unit squared

    Returns:
        Signed area in square meters
    """
    size = len(path)
    if size < 3:
        return 0.0

    total = 0.0
    prev = as_latlng(path[-1])
    prev_tan_lat = math.tan((math.pi / 2 - deg2rad(prev.lat)) / 2)
    prev_lng = deg2rad(prev.lng)

    # Each edge forms a signed triangle with the North Pole
    for point in path:
        point = as_latlng(point)
        tan_lat = math.tan((math.pi / 2 - deg2rad(point.lat)) / 2)
        lng = deg2rad(point.lng)
        total += _polar_triangle_area(tan_lat, lng, prev_tan_lat, prev_lng)
        prev_tan_lat = tan_lat
        prev_lng = lng

    return total * (radius * radius)


def _polar_triangle_area(tan1: float, lng1: float, tan2: float, lng2: float) -> float:
    # Signed area of the triangle (north pole, point 1, point 2) on the unit
    # sphere; tan1/tan2 are tan((pi/2 - lat) / 2). Todhunter, Spherical
    # Trigonometry, p. 71, section 103.
    delta_lng = lng1 - lng2
    t = tan1 * tan2
    return 2 * math.atan2(t * math.sin(delta_lng), 1 + t * math.cos(delta_lng))

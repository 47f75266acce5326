"""
Spherical geometry on a sphere approximating Earth.

Distances, headings, offsets, interpolation, path length, polygon area,
point-in-polygon and point-near-path tests for latitude/longitude points.
"""
from spherical_geometry.core import (
    LatLng,
    as_latlng,
    EARTH_RADIUS,
    DEFAULT_TOLERANCE,
    compute_angle_between,
    compute_distance_between,
    compute_heading,
    compute_offset,
    compute_offset_origin,
    interpolate,
    compute_length,
    compute_area,
    compute_signed_area,
    contains_location,
    is_location_on_edge,
    is_location_on_path,
    is_location_on_edge_or_path,
    location_index_on_edge,
    location_index_on_path,
    location_index_on_edge_or_path,
    distance_to_line,
    intersects,
    is_on_segment_gc,
)
from spherical_geometry import core

__all__ = list(core.__all__)

__version__ = "0.1.0"

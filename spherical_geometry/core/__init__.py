"""
Core spherical-geometry algorithms.

Layered bottom-up: numeric primitives (mathutil), point geometry
(spherical) and polygon/path predicates (poly).
"""
from spherical_geometry.core.latlng import LatLng, as_latlng
from spherical_geometry.core.mathutil import EARTH_RADIUS
from spherical_geometry.core.spherical import (
    compute_angle_between,
    compute_distance_between,
    compute_heading,
    compute_offset,
    compute_offset_origin,
    interpolate,
    compute_length,
    compute_area,
    compute_signed_area,
)
from spherical_geometry.core.poly import (
    DEFAULT_TOLERANCE,
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

__all__ = [
    'LatLng',
    'as_latlng',
    'EARTH_RADIUS',
    'DEFAULT_TOLERANCE',
    'compute_angle_between',
    'compute_distance_between',
    'compute_heading',
    'compute_offset',
    'compute_offset_origin',
    'interpolate',
    'compute_length',
    'compute_area',
    'compute_signed_area',
    'contains_location',
    'is_location_on_edge',
    'is_location_on_path',
    'is_location_on_edge_or_path',
    'location_index_on_edge',
    'location_index_on_path',
    'location_index_on_edge_or_path',
    'distance_to_line',
    'intersects',
    'is_on_segment_gc',
]

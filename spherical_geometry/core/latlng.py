"""
Point value type and coercion of caller-supplied coordinates.

A LatLng is a plain (latitude, longitude) pair in degrees. No range check is
made on construction: the geometry functions wrap and clamp as needed.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from spherical_geometry.utils.exceptions import GeometryError


# Absolute tolerance (raw degrees) for coordinate equality
COORDINATE_EPSILON = 1e-12


@dataclass(frozen=True, eq=False)
class LatLng:
    """
    Immutable latitude/longitude pair in degrees.

    Equality is approximate: two points are equal when both coordinates
    differ by less than COORDINATE_EPSILON. This absorbs round-trip error
    from degree/radian conversion. Tolerant equality is not transitive, so
    LatLng is not hashable.

    Attributes:
        lat: Latitude in decimal degrees
        lng: Longitude in decimal degrees

    Example:
        >>> LatLng(10.0, 20.0) == LatLng(10.0 + 1e-13, 20.0)
        True
    """
    lat: float
    lng: float

    def __eq__(self, other):
        if not isinstance(other, LatLng):
            return NotImplemented
        return (abs(self.lat - other.lat) < COORDINATE_EPSILON
                and abs(self.lng - other.lng) < COORDINATE_EPSILON)

    __hash__ = None

    def __iter__(self):
        yield self.lat
        yield self.lng


def as_latlng(value: Any) -> LatLng:
    """
    Interpret a point-like value as a LatLng.

    Accepted forms:
    - LatLng (returned as is)
    - mapping with 'lat'/'lng' or 'latitude'/'longitude' keys
    - numpy array of shape (2,)
    - any other 2-element sequence (lat, lng)

    Args:
        value: Point-like value

    Returns:
        LatLng

    Raises:
        GeometryError: If the value cannot be read as a coordinate pair

    Example:
        >>> as_latlng((53.3498, -6.2603))
        LatLng(lat=53.3498, lng=-6.2603)
        >>> as_latlng({'latitude': 51.8985, 'longitude': -8.4756})
        LatLng(lat=51.8985, lng=-8.4756)
    """
    if isinstance(value, LatLng):
        return value

    if isinstance(value, Mapping):
        for lat_key, lng_key in (('lat', 'lng'), ('latitude', 'longitude')):
            if lat_key in value and lng_key in value:
                return _from_pair(value[lat_key], value[lng_key], value)
        raise GeometryError(
            "Mapping has no lat/lng or latitude/longitude keys",
            details={'keys': sorted(map(str, value.keys()))}
        )

    if isinstance(value, np.ndarray):
        if value.shape != (2,):
            raise GeometryError(
                "Array point must have shape (2,)",
                details={'shape': value.shape}
            )
        return _from_pair(value[0], value[1], value)

    if isinstance(value, (str, bytes)):
        raise GeometryError("Cannot interpret string as a LatLng", details={'value': value})

    try:
        lat, lng = value
    except (TypeError, ValueError) as e:
        raise GeometryError(
            "Cannot interpret value as a LatLng",
            details={'value': value, 'reason': str(e)}
        ) from e
    return _from_pair(lat, lng, value)


def _from_pair(lat: Any, lng: Any, source: Any) -> LatLng:
    try:
        return LatLng(float(lat), float(lng))
    except (TypeError, ValueError) as e:
        raise GeometryError(
            "Coordinates must be numeric",
            details={'value': source, 'reason': str(e)}
        ) from e

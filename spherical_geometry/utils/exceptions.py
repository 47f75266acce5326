"""
Custom exception hierarchy for spherical-geometry.

All custom exceptions inherit from SphericalGeometryError for easy catching.
Numerical edge cases (poles, antimeridian, degenerate segments) are handled by
clamping and wrapping and never raise; these exceptions cover malformed input
and configuration only.
"""


class SphericalGeometryError(Exception):
    """Base exception for all spherical-geometry errors.

    Attributes:
        details: Dictionary with error context
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.details:
            context = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
            return f"{base} ({context})"
        return base


class ConfigurationError(SphericalGeometryError):
    """Configuration-related errors.

    Raised when configuration loading or validation fails.

    Example:
        >>> raise ConfigurationError("Invalid config: earth_radius must be > 0")
    """
    pass


class GeometryError(SphericalGeometryError):
    """Geometric input errors.

    Raised when a value cannot be interpreted as a point.

    Example:
        >>> raise GeometryError("Cannot interpret value as a LatLng", details={'value': 'abc'})
    """
    pass

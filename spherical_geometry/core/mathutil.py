"""
Numeric primitives for spherical trigonometry.

Scalar helpers shared by the point-geometry and polygon modules: angle
conversion, clamping and modular wrap, the haversine family and the Mercator
projection. All angles are in radians unless a name says otherwise.

The haversine helpers are chosen for numerical stability at small angles,
where the textbook ``acos(1 - 2x)`` form loses most of its precision.

References:
    https://en.wikipedia.org/wiki/Haversine_formula
    https://en.wikipedia.org/wiki/Mercator_projection
"""
import math


# Earth's mean radius in meters (IUGG)
EARTH_RADIUS = 6371009.0


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def rad2deg(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * 180.0 / math.pi


def clamp(x: float, low: float, high: float) -> float:
    """Restrict x to the range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def mod(x: float, m: float) -> float:
    """
    Non-negative remainder of x / m.

    ``math.fmod`` keeps the sign of x, so it is applied twice with a shift of
    m in between.

    Example:
        >>> mod(-20.0, 360.0)
        340.0
    """
    return math.fmod(math.fmod(x, m) + m, m)


def wrap(n: float, low: float, high: float) -> float:
    """
    Wrap n into the half-open interval [low, high).

    Values already inside the interval are returned unchanged.

    Example:
        >>> wrap(200.0, -180.0, 180.0)
        -160.0
        >>> wrap(180.0, -180.0, 180.0)
        -180.0
    """
    if low <= n < high:
        return n
    return mod(n - low, high - low) + low


def mercator(lat: float) -> float:
    """
    Mercator y for a latitude in radians.

    Returns ``-inf`` at (or beyond) the South Pole, where the projection
    diverges.
    """
    tan_value = math.tan(lat * 0.5 + math.pi / 4.0)
    if tan_value <= 0.0:
        return -math.inf
    return math.log(tan_value)


def inverse_mercator(y: float) -> float:
    """Latitude in radians for a Mercator y."""
    return 2.0 * math.atan(math.exp(y)) - math.pi / 2.0


def hav(x: float) -> float:
    """
    Haversine of an angle in radians.

    hav(x) == (1 - cos(x)) / 2 == sin(x / 2)^2
    """
    sin_half = math.sin(x * 0.5)
    return sin_half * sin_half


def arc_hav(x: float) -> float:
    """
    Inverse haversine, stable around 0.

    arc_hav(x) == acos(1 - 2 * x) == 2 * asin(sqrt(x))

    The argument is clamped to [0, 1] so that rounding just outside the
    domain (antipodal points) does not raise.
    """
    return 2.0 * math.asin(math.sqrt(clamp(x, 0.0, 1.0)))


def sin_from_hav(h: float) -> float:
    """Given h == hav(x), return sin(abs(x))."""
    return 2.0 * math.sqrt(max(h * (1.0 - h), 0.0))


def hav_from_sin(x: float) -> float:
    """Return hav(asin(x))."""
    x2 = x * x
    return x2 / (1.0 + math.sqrt(max(1.0 - x2, 0.0))) * 0.5


def sin_sum_from_hav(x: float, y: float) -> float:
    """Return sin(arc_hav(x) + arc_hav(y))."""
    a = math.sqrt(max(x * (1.0 - x), 0.0))
    b = math.sqrt(max(y * (1.0 - y), 0.0))
    return 2.0 * (a + b - 2.0 * (a * y + b * x))


def hav_distance(lat1: float, lat2: float, d_lng: float) -> float:
    """
    Haversine of the central angle between two points on the unit sphere.

    Args:
        lat1: Latitude of the first point (radians)
        lat2: Latitude of the second point (radians)
        d_lng: Longitude difference between the points (radians)

    Returns:
        hav() of the great-circle angle between the points
    """
    return hav(lat1 - lat2) + hav(d_lng) * math.cos(lat1) * math.cos(lat2)

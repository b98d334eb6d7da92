"""Great-circle distance helpers."""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two points on a spherical Earth.

    Args:
        lat1, lon1: First point in decimal degrees
        lat2, lon2: Second point in decimal degrees

    Returns:
        Distance in kilometres (mean Earth radius 6371 km)

    Examples:
        >>> round(haversine_km(51.5, -0.1, 51.5, -0.1), 6)
        0.0

        >>> round(haversine_km(0.0, 0.0, 0.0, 180.0))
        20015
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    # Floating point error can leave a just above 1.0 near antipodes
    a = min(1.0, max(0.0, a))
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """True when both values are finite and inside the WGS84 ranges."""
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0


__all__ = [
    "EARTH_RADIUS_KM",
    "haversine_km",
    "is_valid_coordinate",
]

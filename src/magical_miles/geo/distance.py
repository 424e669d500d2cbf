"""Great-circle distance on a spherical Earth.

The fare engine prices trips with this distance whenever live routing
metrics are unavailable.
"""

from math import asin, cos, radians, sin, sqrt

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in kilometers between two (lat, lon) points in degrees.

    Example:
        >>> round(haversine_distance_km(28.6139, 77.2090, 28.5355, 77.3910), 2)
        19.8
    """
    phi1, phi2 = radians(lat1), radians(lat2)
    half_dphi = radians(lat2 - lat1) / 2
    half_dlambda = radians(lon2 - lon1) / 2

    h = sin(half_dphi) ** 2 + cos(phi1) * cos(phi2) * sin(half_dlambda) ** 2
    # Clamp rounding noise for antipodal points
    return 2 * EARTH_RADIUS_KM * asin(min(1.0, sqrt(h)))

"""
Great-circle distance between two WGS84 coordinates (haversine formula).
"""

import math

from app.schemas.geo import GeoCoordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """
    Calculate the great-circle distance between two points in kilometers.

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        Distance along the earth's surface in kilometers
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    )
    # rounding can push h a hair above 1 for antipodal points
    h = min(h, 1.0)
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))

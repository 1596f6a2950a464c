"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for horizontal distance calculations.
DO NOT duplicate these functions elsewhere.

Coordinates follow GeoJSON order: [longitude, latitude, elevation?].
"""
import math
from typing import Any, Sequence

# Earth radius in statute miles
EARTH_RADIUS_MI = 3958.8


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_position(position: Any) -> bool:
    """True for a [lon, lat, ...] sequence with numeric lon and lat."""
    return (
        isinstance(position, (list, tuple))
        and len(position) >= 2
        and _is_number(position[0])
        and _is_number(position[1])
    )


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in miles
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_MI * c


def calculate_distance_miles(coordinates: Sequence[Sequence[float]]) -> float:
    """
    Calculate total horizontal distance along a route.

    Args:
        coordinates: Ordered [lon, lat] or [lon, lat, elevation] positions

    Returns:
        Total distance in miles (0 for fewer than two positions)
    """
    total = 0.0

    for i in range(1, len(coordinates)):
        lon1, lat1 = coordinates[i - 1][0], coordinates[i - 1][1]
        lon2, lat2 = coordinates[i][0], coordinates[i][1]
        total += haversine(lat1, lon1, lat2, lon2)

    return total

"""
Shared utilities (NOT business logic).

Usage:
    from trip_journal.shared import haversine, calculate_elevation_gain_ft
    from trip_journal.shared.formatters import format_distance_mi
"""
from .geo import (
    haversine,
    calculate_distance_miles,
    is_position,
    EARTH_RADIUS_MI,
)
from .elevation import (
    calculate_elevation_gain_ft,
)
from .formatters import (
    format_number,
    format_distance_mi,
    format_elevation_ft,
    format_vert_per_mile,
)
from .constants import (
    TripStatus,
    DEFAULT_MAP_CENTER,
    DEFAULT_MAP_ZOOM,
)

__all__ = [
    # geo
    "haversine",
    "calculate_distance_miles",
    "is_position",
    "EARTH_RADIUS_MI",
    # elevation
    "calculate_elevation_gain_ft",
    # formatters
    "format_number",
    "format_distance_mi",
    "format_elevation_ft",
    "format_vert_per_mile",
    # constants
    "TripStatus",
    "DEFAULT_MAP_CENTER",
    "DEFAULT_MAP_ZOOM",
]

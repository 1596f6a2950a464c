"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import Any, Optional, Sequence


def _elevation_of(position: Any) -> Optional[float]:
    """Third component of a GeoJSON position, if numeric."""
    if not isinstance(position, (list, tuple)) or len(position) < 3:
        return None
    elevation = position[2]
    if not isinstance(elevation, (int, float)) or isinstance(elevation, bool):
        return None
    return elevation


def calculate_elevation_gain_ft(coordinates: Sequence[Sequence[float]]) -> float:
    """
    Calculate cumulative elevation gain along a route.

    Only ascents count; descents are ignored, never subtracted.
    A pair of positions contributes only when both carry an elevation.

    Args:
        coordinates: Ordered [lon, lat, elevation] positions (feet)

    Returns:
        Total gain in feet
    """
    gain = 0.0

    for i in range(1, len(coordinates)):
        prev = _elevation_of(coordinates[i - 1])
        curr = _elevation_of(coordinates[i])
        if prev is None or curr is None:
            continue
        diff = curr - prev
        if diff > 0:
            gain += diff

    return gain

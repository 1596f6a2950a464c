"""
Unified constants for trip pages.

Map defaults and the per-day colour palette live here so that the
pipeline and every presentation surface agree on them.
"""

from enum import Enum


class TripStatus(str, Enum):
    """
    Overall outcome of a trip load.

    A trip whose metadata cannot be loaded never gets a status; it is
    reported as an error instead.
    """
    OK = "ok"
    NO_DAYS = "no_days"      # meta.json lists no day files
    NO_ROUTE = "no_route"    # nothing to draw, bounds undeterminable


# Map view used when no route bounds can be determined (continental US)
DEFAULT_MAP_CENTER: tuple[float, float] = (39.5, -98.35)
DEFAULT_MAP_ZOOM: int = 4

# Day route colours, cycled by day index
DAY_COLORS_NEUTRAL: list[str] = [
    "#e8c170",
    "#7fb3d5",
    "#c39bd3",
    "#76d7c4",
    "#f0b27a",
    "#f1948a",
    "#aed581",
    "#90a4ae",
]

DAY_COLORS_HOVER: list[str] = [
    "#ffd98a",
    "#a9d3f0",
    "#e0bdf0",
    "#9ff5e3",
    "#ffd0a0",
    "#ffb7ae",
    "#cdf59c",
    "#b8ccd6",
]

# Colour dot for rows that failed to load
FAILED_DAY_COLOR = "#3a3a3a"

META_FILENAME = "meta.json"

"""
Formatting utilities for display.

Used by the API report and the CLI.
"""
import math
from typing import Optional

NOT_AVAILABLE = "—"


def format_number(value: float) -> str:
    """Round half up to an integer and group thousands (e.g. '3,800')."""
    return f"{math.floor(value + 0.5):,}"


def format_distance_mi(miles: float) -> str:
    """
    Format distance.

    Args:
        miles: Distance in miles

    Returns:
        Formatted string (e.g., '14.2 mi')
    """
    return f"{miles:.1f} mi"


def format_elevation_ft(feet: float, signed: bool = False) -> str:
    """
    Format elevation gain.

    Args:
        feet: Elevation in feet
        signed: Prefix with '+' (day rows and tooltips)

    Returns:
        Formatted string (e.g., '3,800 ft' or '+3,800 ft')
    """
    prefix = "+" if signed else ""
    return f"{prefix}{format_number(feet)} ft"


def format_vert_per_mile(vert_per_mile: Optional[float]) -> str:
    """Format vert per mile, or a dash when distance was zero."""
    if vert_per_mile is None:
        return NOT_AVAILABLE
    return f"{format_number(vert_per_mile)} ft/mi"

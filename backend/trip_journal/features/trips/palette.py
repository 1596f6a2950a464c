"""Deterministic per-day colours, keyed by declaration index."""

from trip_journal.shared.constants import (
    DAY_COLORS_HOVER,
    DAY_COLORS_NEUTRAL,
    FAILED_DAY_COLOR,
)


def day_color(index: int, ok: bool = True) -> str:
    """Route colour for a day; failed days get the neutral grey."""
    if not ok:
        return FAILED_DAY_COLOR
    return DAY_COLORS_NEUTRAL[index % len(DAY_COLORS_NEUTRAL)]


def day_hover_color(index: int) -> str:
    return DAY_COLORS_HOVER[index % len(DAY_COLORS_HOVER)]

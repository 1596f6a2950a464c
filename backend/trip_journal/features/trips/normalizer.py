"""
Day entry normalization.

meta.json has listed days in two shapes over time:

LEGACY (string) - stats come from embedded GeoJSON properties when
present, otherwise they are computed from the coordinates:
    "days": ["day-1.geojson", "day-2.geojson"]

MANUAL (object) - stats come from meta.json; the GeoJSON is only drawn:
    "days": [
        {"file": "day-1.geojson", "distance_miles": 14.2, "elevation_gain_ft": 3800}
    ]

The shape is resolved once by parse_day_entry; everything downstream
works with the dataclasses.
"""

import logging
from typing import Any, Callable, Optional, Sequence

from .geometry import extract_coordinates, first_feature_properties
from .metrics import RouteMetrics, calculate_route_metrics
from .models import DayEntry, LegacyDayEntry, ManualDayEntry

logger = logging.getLogger(__name__)

MetricsCalculator = Callable[[Sequence[Sequence[float]]], RouteMetrics]


class InvalidDayEntryError(ValueError):
    """A meta.json day entry that is neither a filename nor a {file: ...} object."""
    pass


def _optional_number(value: Any, field_name: str) -> Optional[float]:
    """None stays None; numbers become float; anything else is rejected."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    return float(value)


def parse_day_entry(raw: Any) -> DayEntry:
    """
    Resolve a raw meta.json day entry into its variant.

    Raises:
        InvalidDayEntryError: If the entry has no usable filename or
            carries non-numeric stats
    """
    if isinstance(raw, str):
        if not raw:
            raise InvalidDayEntryError("Invalid day entry: empty filename")
        return LegacyDayEntry(file=raw)

    if isinstance(raw, dict):
        filename = raw.get("file")
        if not isinstance(filename, str) or not filename:
            raise InvalidDayEntryError("Invalid day entry: missing file")
        try:
            distance = _optional_number(raw.get("distance_miles"), "distance_miles")
            elevation = _optional_number(raw.get("elevation_gain_ft"), "elevation_gain_ft")
        except ValueError as e:
            raise InvalidDayEntryError(f"Invalid day entry: {e}") from e
        return ManualDayEntry(
            file=filename,
            distance_miles=distance,
            elevation_gain_ft=elevation,
        )

    raise InvalidDayEntryError(f"Invalid day entry: {type(raw).__name__}")


def normalize_day(
    entry: DayEntry,
    geojson: Any,
    calculator: MetricsCalculator = calculate_route_metrics,
) -> tuple[float, float]:
    """
    Distance (mi) and elevation gain (ft) for one day.

    Manual entries always use their own numbers (0 when absent) and never
    look at the geometry. Legacy entries use the first feature's
    distance_miles / elevation_gain_ft properties verbatim and compute
    whichever one is missing.

    Raises:
        ValueError: If an embedded property is not a number
    """
    if isinstance(entry, ManualDayEntry):
        distance = entry.distance_miles if entry.distance_miles is not None else 0.0
        elevation = entry.elevation_gain_ft if entry.elevation_gain_ft is not None else 0.0
        return distance, elevation

    properties = first_feature_properties(geojson) or {}
    distance = _optional_number(properties.get("distance_miles"), "distance_miles")
    elevation = _optional_number(properties.get("elevation_gain_ft"), "elevation_gain_ft")

    if distance is None or elevation is None:
        computed = calculator(extract_coordinates(geojson))
        logger.debug(
            f"Computed metrics for {entry.file}: "
            f"{computed.distance_miles:.2f} mi, {computed.elevation_gain_ft:.0f} ft"
        )
        if distance is None:
            distance = computed.distance_miles
        if elevation is None:
            elevation = computed.elevation_gain_ft

    return distance, elevation

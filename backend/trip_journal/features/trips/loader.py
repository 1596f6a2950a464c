"""
Day loader.

Loads one day's GeoJSON and turns it into a DayResult. Never raises:
every failure becomes an ok=False result so sibling days keep loading.
"""

import logging
from typing import Any, Optional

from .client import ResourceParseError, TripDataClient
from .geometry import first_feature_properties
from .metrics import calculate_route_metrics
from .models import DayEntry, DayResult, LegacyDayEntry, ManualDayEntry
from .normalizer import (
    InvalidDayEntryError,
    MetricsCalculator,
    normalize_day,
    parse_day_entry,
)

logger = logging.getLogger(__name__)


def failed_day(index: int, error: str, filename=None, url=None) -> DayResult:
    """Result for a day that could not be loaded; numbered by position."""
    return DayResult(
        index=index,
        day_number=index + 1,
        ok=False,
        distance=0.0,
        elevation=0.0,
        geometry=None,
        error=error,
        filename=filename,
        url=url,
    )


def _as_day_entry(entry: Any) -> DayEntry:
    if isinstance(entry, (LegacyDayEntry, ManualDayEntry)):
        return entry
    return parse_day_entry(entry)


def describe_entry(
    client: TripDataClient, trip_id: str, entry: Any
) -> tuple[Optional[str], Optional[str]]:
    """(filename, url) of a raw day entry; (None, None) if it is invalid."""
    try:
        filename = _as_day_entry(entry).file
    except InvalidDayEntryError:
        return None, None
    return filename, client.resource_url(trip_id, filename)


def log_failure(entry: Any, url: Optional[str], message: str) -> None:
    logger.warning(f"Failed to load {url or repr(entry)}: {message}")


async def load_day(
    client: TripDataClient,
    trip_id: str,
    entry: Any,
    index: int,
    calculator: MetricsCalculator = calculate_route_metrics,
) -> DayResult:
    """
    Fetch, parse and normalize one day.

    Args:
        client: Data client bound to the data root
        trip_id: Trip folder name
        entry: Raw meta.json entry or an already parsed day entry
        index: Zero-based position in meta.json "days"
        calculator: Metric calculator for legacy days without embedded stats

    Returns:
        DayResult (ok=False with an error message on any failure)
    """
    filename = None
    url = None

    try:
        day_entry = _as_day_entry(entry)
        filename = day_entry.file
        url = client.resource_url(trip_id, filename)

        geojson = await client.get_day_geometry(trip_id, filename)
        if not isinstance(geojson, dict):
            raise ResourceParseError("Invalid GeoJSON: expected an object")

        properties = first_feature_properties(geojson) or {}
        day_number = properties.get("day")
        if day_number is None:
            day_number = index + 1

        distance, elevation = normalize_day(day_entry, geojson, calculator)

    except Exception as e:
        message = str(e) or type(e).__name__
        log_failure(entry, url, message)
        return failed_day(index, message, filename=filename, url=url)

    return DayResult(
        index=index,
        day_number=day_number,
        ok=True,
        distance=distance,
        elevation=elevation,
        geometry=geojson,
        error=None,
        filename=filename,
        url=url,
    )

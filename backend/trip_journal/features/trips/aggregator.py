"""
Trip aggregator.

Loads every declared day concurrently and reduces the results into trip
totals and a map view. Results always come back in declaration order,
whatever order the fetches finish in.
"""

import asyncio
import logging
from typing import Any, Optional, Sequence

from trip_journal.shared.constants import DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM

from .client import TripDataClient
from .geometry import BoundsUnavailableError, compute_bounds, route_endpoints
from .loader import describe_entry, failed_day, load_day, log_failure
from .metrics import calculate_route_metrics
from .models import DayResult, MapView, TripAggregate, TripTotals
from .normalizer import MetricsCalculator

logger = logging.getLogger(__name__)

# Used when no loaded day has coordinates to fit the map to
DEFAULT_MAP_VIEW = MapView(center=DEFAULT_MAP_CENTER, zoom=DEFAULT_MAP_ZOOM)

TIMED_OUT_MESSAGE = "Timed out"


class EmptyDayListError(Exception):
    """meta.json declares no days; nothing to aggregate."""

    def __init__(self, message: str = "No day files listed in meta.json."):
        super().__init__(message)


async def load_all_days(
    client: TripDataClient,
    trip_id: str,
    entries: Sequence[Any],
    calculator: MetricsCalculator = calculate_route_metrics,
    max_concurrent: Optional[int] = None,
    timeout: Optional[float] = None,
) -> list[DayResult]:
    """
    Load all days at once and return their results by declaration index.

    Args:
        client: Data client bound to the data root
        trip_id: Trip folder name
        entries: Raw meta.json "days" entries
        calculator: Metric calculator passed to each loader
        max_concurrent: Cap on simultaneous fetches (None = unbounded)
        timeout: Seconds to wait for all days; unfinished days fail
            with "Timed out"

    Raises:
        EmptyDayListError: If entries is empty
    """
    if not entries:
        raise EmptyDayListError()

    semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent else None

    async def _load(entry: Any, index: int) -> DayResult:
        if semaphore is None:
            return await load_day(client, trip_id, entry, index, calculator)
        async with semaphore:
            return await load_day(client, trip_id, entry, index, calculator)

    tasks = [
        asyncio.create_task(_load(entry, index))
        for index, entry in enumerate(entries)
    ]

    if timeout is None:
        return list(await asyncio.gather(*tasks))

    _, pending = await asyncio.wait(tasks, timeout=timeout)
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            f"Trip {trip_id}: {len(pending)}/{len(tasks)} days still loading "
            f"after {timeout}s"
        )

    results = []
    for index, task in enumerate(tasks):
        if task in pending:
            filename, url = describe_entry(client, trip_id, entries[index])
            log_failure(entries[index], url, TIMED_OUT_MESSAGE)
            results.append(
                failed_day(index, TIMED_OUT_MESSAGE, filename=filename, url=url)
            )
        else:
            results.append(task.result())
    return results


def aggregate_results(
    results: list[DayResult],
    fallback_view: MapView = DEFAULT_MAP_VIEW,
) -> TripAggregate:
    """
    Totals, map view and route endpoints for already loaded days.

    Only ok days count towards totals and bounds. When no bounds can be
    determined the fallback view is used and map_error is set.
    """
    totals = TripTotals.from_results(results)

    map_error = None
    try:
        map_view = MapView(bounds=compute_bounds(results))
    except BoundsUnavailableError as e:
        map_view = fallback_view
        map_error = str(e)

    start_point, end_point = route_endpoints(results)

    return TripAggregate(
        days=results,
        totals=totals,
        map_view=map_view,
        map_error=map_error,
        start_point=start_point,
        end_point=end_point,
    )


async def aggregate_days(
    client: TripDataClient,
    trip_id: str,
    entries: Sequence[Any],
    calculator: MetricsCalculator = calculate_route_metrics,
    fallback_view: MapView = DEFAULT_MAP_VIEW,
    max_concurrent: Optional[int] = None,
    timeout: Optional[float] = None,
) -> TripAggregate:
    """Load all days, then aggregate them (see load_all_days for errors)."""
    results = await load_all_days(
        client,
        trip_id,
        entries,
        calculator=calculator,
        max_concurrent=max_concurrent,
        timeout=timeout,
    )
    return aggregate_results(results, fallback_view=fallback_view)

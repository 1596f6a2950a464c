"""TripService — meta.json to TripReport."""

from __future__ import annotations

import logging
from typing import Optional

from trip_journal.config import settings
from trip_journal.shared.constants import TripStatus

from .aggregator import DEFAULT_MAP_VIEW, EmptyDayListError, aggregate_days
from .client import TripDataClient, TripMetadataError
from .metrics import calculate_route_metrics
from .models import LegendItem, MapView, TripReport
from .normalizer import MetricsCalculator
from .palette import day_color

logger = logging.getLogger(__name__)


class TripService:
    """
    Builds the report for one trip page.

    Usage:
        async with TripDataClient(settings.data_root) as client:
            report = await TripService(client).load_trip("appalachian-trail")
    """

    def __init__(
        self,
        client: TripDataClient,
        calculator: MetricsCalculator = calculate_route_metrics,
        fallback_view: MapView = DEFAULT_MAP_VIEW,
        max_concurrent: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.calculator = calculator
        self.fallback_view = fallback_view
        self.max_concurrent = max_concurrent if max_concurrent is not None else settings.max_concurrent_fetches
        self.timeout = timeout if timeout is not None else settings.trip_timeout_seconds

    async def load_trip(self, trip_id: str) -> TripReport:
        """
        Load metadata and every day of a trip.

        An empty day list or a trip with nothing to draw is reported in the
        result (status and map_error), not raised.

        Raises:
            TripMetadataError: If meta.json cannot be loaded
        """
        try:
            meta = await self.client.get_meta(trip_id)
        except TripMetadataError as e:
            logger.error(f"Could not load trip metadata for {trip_id}: {e}")
            raise

        try:
            aggregate = await aggregate_days(
                self.client,
                trip_id,
                meta.days,
                calculator=self.calculator,
                fallback_view=self.fallback_view,
                max_concurrent=self.max_concurrent,
                timeout=self.timeout,
            )
        except EmptyDayListError as e:
            logger.warning(f"Trip {trip_id}: {e}")
            return TripReport(
                trip_id=trip_id,
                meta=meta,
                status=TripStatus.NO_DAYS,
                map_error=str(e),
            )

        ok_days = aggregate.ok_days
        failed = len(aggregate.days) - len(ok_days)
        if aggregate.map_error:
            status = TripStatus.NO_ROUTE
            logger.warning(f"Trip {trip_id}: {aggregate.map_error}")
        else:
            status = TripStatus.OK

        totals = aggregate.totals
        logger.info(
            f"Trip {trip_id} loaded: {len(ok_days)}/{len(aggregate.days)} days "
            f"({failed} failed), {totals.total_distance:.1f} mi, "
            f"{totals.total_elevation:.0f} ft"
        )

        legend = [
            LegendItem(index=day.index, day_number=day.day_number, color=day_color(day.index))
            for day in ok_days
        ]

        return TripReport(
            trip_id=trip_id,
            meta=meta,
            status=status,
            days=aggregate.days,
            totals=totals,
            legend=legend,
            map_view=aggregate.map_view,
            map_error=aggregate.map_error,
            start_point=aggregate.start_point,
            end_point=aggregate.end_point,
        )

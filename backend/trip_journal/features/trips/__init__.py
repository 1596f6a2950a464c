"""Trips feature module — day loading, route metrics, trip totals."""

from .models import (
    LegacyDayEntry,
    ManualDayEntry,
    DayEntry,
    DayResult,
    TripTotals,
    MapBounds,
    MapView,
    LegendItem,
    TripAggregate,
    TripReport,
)
from .schemas import TripMeta, TripReportSchema
from .geometry import (
    BoundsUnavailableError,
    extract_coordinates,
    first_feature_properties,
    compute_bounds,
    route_endpoints,
)
from .metrics import RouteMetrics, calculate_route_metrics
from .normalizer import InvalidDayEntryError, parse_day_entry, normalize_day
from .client import (
    TripDataClient,
    TripDataError,
    ResourceNotFoundError,
    ResourceFetchError,
    ResourceParseError,
    TripMetadataError,
)
from .loader import load_day
from .aggregator import (
    DEFAULT_MAP_VIEW,
    EmptyDayListError,
    load_all_days,
    aggregate_results,
    aggregate_days,
)
from .service import TripService

__all__ = [
    "LegacyDayEntry",
    "ManualDayEntry",
    "DayEntry",
    "DayResult",
    "TripTotals",
    "MapBounds",
    "MapView",
    "LegendItem",
    "TripAggregate",
    "TripReport",
    "TripMeta",
    "TripReportSchema",
    "BoundsUnavailableError",
    "extract_coordinates",
    "first_feature_properties",
    "compute_bounds",
    "route_endpoints",
    "RouteMetrics",
    "calculate_route_metrics",
    "InvalidDayEntryError",
    "parse_day_entry",
    "normalize_day",
    "TripDataClient",
    "TripDataError",
    "ResourceNotFoundError",
    "ResourceFetchError",
    "ResourceParseError",
    "TripMetadataError",
    "load_day",
    "DEFAULT_MAP_VIEW",
    "EmptyDayListError",
    "load_all_days",
    "aggregate_results",
    "aggregate_days",
    "TripService",
]

"""Data models for the trip pipeline (dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from trip_journal.shared.constants import TripStatus

from .schemas import TripMeta


# =============================================================================
# Day entries (meta.json "days")
# =============================================================================

@dataclass(frozen=True)
class LegacyDayEntry:
    """Bare filename; stats come from the geometry itself."""

    file: str

@dataclass(frozen=True)
class ManualDayEntry:
    """Filename plus hand-measured stats that always win over the geometry."""

    file: str
    distance_miles: Optional[float] = None
    elevation_gain_ft: Optional[float] = None

DayEntry = Union[LegacyDayEntry, ManualDayEntry]


# =============================================================================
# Results
# =============================================================================

@dataclass(frozen=True)
class DayResult:
    """Outcome of loading one declared day."""

    index: int  # position in meta.json "days", stable identity
    day_number: Any  # label; embedded "day" property or index + 1
    ok: bool
    distance: float = 0.0  # miles
    elevation: float = 0.0  # feet of gain
    geometry: Optional[dict] = None  # only when ok
    error: Optional[str] = None  # only when not ok
    filename: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class TripTotals:
    """Sums over successfully loaded days."""

    total_distance: float = 0.0
    total_elevation: float = 0.0
    vert_per_mile: Optional[float] = None  # None when total_distance == 0

    @classmethod
    def from_results(cls, results: list[DayResult]) -> TripTotals:
        total_distance = 0.0
        total_elevation = 0.0
        for day in results:
            if not day.ok:
                continue
            total_distance += day.distance
            total_elevation += day.elevation

        vert_per_mile = None
        if total_distance > 0:
            vert_per_mile = total_elevation / total_distance

        return cls(
            total_distance=total_distance,
            total_elevation=total_elevation,
            vert_per_mile=vert_per_mile,
        )


# =============================================================================
# Map
# =============================================================================

@dataclass(frozen=True)
class MapBounds:
    """Bounding box in degrees."""

    south: float
    west: float
    north: float
    east: float


@dataclass(frozen=True)
class MapView:
    """Where the map should look: fitted bounds or a fixed centre."""

    bounds: Optional[MapBounds] = None
    center: Optional[tuple[float, float]] = None  # (lat, lon)
    zoom: Optional[int] = None


@dataclass(frozen=True)
class LegendItem:
    index: int
    day_number: Any
    color: str


# =============================================================================
# Aggregates
# =============================================================================

@dataclass
class TripAggregate:
    """Ordered day results plus what is derived from them."""

    days: list[DayResult]
    totals: TripTotals
    map_view: MapView
    map_error: Optional[str] = None
    start_point: Optional[tuple[float, float]] = None  # (lat, lon)
    end_point: Optional[tuple[float, float]] = None

    @property
    def ok_days(self) -> list[DayResult]:
        return [d for d in self.days if d.ok]


@dataclass
class TripReport:
    """Everything a trip page needs, in pipeline order."""

    trip_id: str
    meta: TripMeta
    status: TripStatus
    days: list[DayResult] = field(default_factory=list)
    totals: TripTotals = field(default_factory=TripTotals)
    legend: list[LegendItem] = field(default_factory=list)
    map_view: Optional[MapView] = None
    map_error: Optional[str] = None
    start_point: Optional[tuple[float, float]] = None
    end_point: Optional[tuple[float, float]] = None

    @property
    def title(self) -> str:
        return self.meta.display_title(self.trip_id)

"""
Trip schemas.

Pydantic models for meta.json and for the trip report handed to
presentation (API responses and CLI JSON output).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from trip_journal.shared.formatters import (
    format_distance_mi,
    format_elevation_ft,
    format_vert_per_mile,
)

from .palette import day_color, day_hover_color

if TYPE_CHECKING:
    from .models import DayResult, MapView, TripReport, TripTotals


# === meta.json ===


class TripMeta(BaseModel):
    """Trip metadata document ({data_root}/{trip_id}/meta.json)."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    description: str = ""
    start_date: str = ""
    start_time: str = ""
    end_date: str = ""
    end_time: str = ""
    days: list[Any] = []

    @field_validator(
        "title", "description", "start_date", "start_time", "end_date", "end_time",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v):
        if v is None:
            return ""
        return str(v)

    @field_validator("days", mode="before")
    @classmethod
    def days_must_be_list(cls, v):
        """Anything but a JSON array means no days."""
        if not isinstance(v, list):
            return []
        return v

    def display_title(self, trip_id: str) -> str:
        return self.title or trip_id


# === Report ===


class DayResultSchema(BaseModel):
    index: int
    day_number: Any
    ok: bool
    filename: Optional[str] = None
    distance: float
    elevation: float
    distance_label: Optional[str] = None
    elevation_label: Optional[str] = None
    color: str
    hover_color: Optional[str] = None
    error: Optional[str] = None
    geometry: Optional[dict] = None

    @classmethod
    def from_result(cls, day: DayResult, include_geometry: bool = True) -> DayResultSchema:
        return cls(
            index=day.index,
            day_number=day.day_number,
            ok=day.ok,
            filename=day.filename,
            distance=day.distance,
            elevation=day.elevation,
            distance_label=format_distance_mi(day.distance) if day.ok else None,
            elevation_label=format_elevation_ft(day.elevation, signed=True) if day.ok else None,
            color=day_color(day.index, ok=day.ok),
            hover_color=day_hover_color(day.index) if day.ok else None,
            error=day.error,
            geometry=day.geometry if include_geometry else None,
        )


class TripTotalsSchema(BaseModel):
    total_distance: float
    total_elevation: float
    vert_per_mile: Optional[float] = None
    total_distance_label: str
    total_elevation_label: str
    vert_per_mile_label: str

    @classmethod
    def from_totals(cls, totals: TripTotals) -> TripTotalsSchema:
        return cls(
            total_distance=totals.total_distance,
            total_elevation=totals.total_elevation,
            vert_per_mile=totals.vert_per_mile,
            total_distance_label=format_distance_mi(totals.total_distance),
            total_elevation_label=format_elevation_ft(totals.total_elevation),
            vert_per_mile_label=format_vert_per_mile(totals.vert_per_mile),
        )


class MapBoundsSchema(BaseModel):
    south: float
    west: float
    north: float
    east: float


class MapViewSchema(BaseModel):
    bounds: Optional[MapBoundsSchema] = None
    center: Optional[tuple[float, float]] = None
    zoom: Optional[int] = None

    @classmethod
    def from_view(cls, view: MapView) -> MapViewSchema:
        bounds = None
        if view.bounds is not None:
            bounds = MapBoundsSchema(
                south=view.bounds.south,
                west=view.bounds.west,
                north=view.bounds.north,
                east=view.bounds.east,
            )
        return cls(bounds=bounds, center=view.center, zoom=view.zoom)


class LegendItemSchema(BaseModel):
    index: int
    day_number: Any
    color: str


class TripReportSchema(BaseModel):
    trip_id: str
    title: str
    description: str = ""
    start_date: str = ""
    start_time: str = ""
    end_date: str = ""
    end_time: str = ""
    status: str
    days: list[DayResultSchema] = []
    totals: TripTotalsSchema
    legend: list[LegendItemSchema] = []
    map_view: Optional[MapViewSchema] = None
    map_error: Optional[str] = None
    start_point: Optional[tuple[float, float]] = None
    end_point: Optional[tuple[float, float]] = None

    @classmethod
    def from_report(cls, report: TripReport, include_geometry: bool = True) -> TripReportSchema:
        meta = report.meta
        return cls(
            trip_id=report.trip_id,
            title=report.title,
            description=meta.description,
            start_date=meta.start_date,
            start_time=meta.start_time,
            end_date=meta.end_date,
            end_time=meta.end_time,
            status=report.status.value,
            days=[DayResultSchema.from_result(d, include_geometry) for d in report.days],
            totals=TripTotalsSchema.from_totals(report.totals),
            legend=[
                LegendItemSchema(index=item.index, day_number=item.day_number, color=item.color)
                for item in report.legend
            ],
            map_view=MapViewSchema.from_view(report.map_view) if report.map_view else None,
            map_error=report.map_error,
            start_point=report.start_point,
            end_point=report.end_point,
        )

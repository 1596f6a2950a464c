"""
Route metrics from raw coordinates.

Pure functions, no I/O. Distance and gain math itself lives in
trip_journal.shared so the CLI and tests can use it directly.
"""

from dataclasses import dataclass
from typing import Sequence

from trip_journal.shared.elevation import calculate_elevation_gain_ft
from trip_journal.shared.geo import calculate_distance_miles, is_position


@dataclass(frozen=True)
class RouteMetrics:
    distance_miles: float = 0.0
    elevation_gain_ft: float = 0.0


def calculate_route_metrics(coordinates: Sequence[Sequence[float]]) -> RouteMetrics:
    """
    Horizontal distance (mi) and ascending-only gain (ft).

    Positions without numeric lon/lat are dropped before measuring.
    """
    coordinates = [p for p in coordinates if is_position(p)]
    if len(coordinates) < 2:
        return RouteMetrics()

    return RouteMetrics(
        distance_miles=calculate_distance_miles(coordinates),
        elevation_gain_ft=calculate_elevation_gain_ft(coordinates),
    )

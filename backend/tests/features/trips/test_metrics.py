"""
Tests for route metrics.

Distance is direction independent; gain is not.
"""

import pytest

from trip_journal.features.trips import calculate_route_metrics
from trip_journal.shared.geo import calculate_distance_miles

from trips_helpers import DAY_ONE_COORDS


class TestRouteMetrics:

    @pytest.mark.parametrize("coords", [
        [],
        [[-72.0, 44.0, 1000]],
    ])
    def test_short_sequences_are_zero(self, coords):
        metrics = calculate_route_metrics(coords)
        assert metrics.distance_miles == 0.0
        assert metrics.elevation_gain_ft == 0.0

    def test_day_one(self):
        metrics = calculate_route_metrics(DAY_ONE_COORDS)
        # 0.0145 degrees of latitude
        assert metrics.distance_miles == pytest.approx(1.0019, rel=0.001)
        # +300, -100, +300
        assert metrics.elevation_gain_ft == 600.0

    def test_reversed_route(self):
        forward = calculate_route_metrics(DAY_ONE_COORDS)
        backward = calculate_route_metrics(list(reversed(DAY_ONE_COORDS)))

        assert backward.distance_miles == pytest.approx(forward.distance_miles, rel=1e-12)
        # -300, +100, -300 walked backwards
        assert backward.elevation_gain_ft == 100.0

    def test_matches_shared_distance(self):
        metrics = calculate_route_metrics(DAY_ONE_COORDS)
        assert metrics.distance_miles == calculate_distance_miles(DAY_ONE_COORDS)

    @pytest.mark.parametrize("bad", [[-72.8], None, ["x", "y", 150], 7])
    def test_malformed_positions_dropped(self, bad):
        coords = [[-72.8, 44.0, 100], bad, [-72.8, 44.01, 200]]
        metrics = calculate_route_metrics(coords)

        valid_pair = [[-72.8, 44.0, 100], [-72.8, 44.01, 200]]
        assert metrics.distance_miles == calculate_distance_miles(valid_pair)
        assert metrics.elevation_gain_ft == 100.0

    def test_only_one_valid_position(self):
        metrics = calculate_route_metrics([[-72.8, 44.0, 100], [-72.8], None])
        assert (metrics.distance_miles, metrics.elevation_gain_ft) == (0.0, 0.0)

"""
Tests for the trip-journal CLI.

Uses a local data root in a temporary directory.
"""

import json

import pytest
from click.testing import CliRunner

from trip_journal.cli import cli


@pytest.fixture
def data_dir(tmp_path):
    trip = tmp_path / "long-trail"
    trip.mkdir()
    (trip / "meta.json").write_text(json.dumps({
        "title": "Long Trail",
        "start_date": "2024-07-01",
        "days": [
            "day-1.geojson",
            {"file": "day-2.geojson", "distance_miles": 11.7, "elevation_gain_ft": 2100},
            "day-3.geojson",
        ],
    }), encoding="utf-8")
    (trip / "day-1.geojson").write_text(json.dumps({
        "type": "FeatureCollection",
        "features": [{
            "type": "Feature",
            "properties": {"distance_miles": 14.2, "elevation_gain_ft": 3800},
            "geometry": {"type": "LineString", "coordinates": [[-72.8, 44.0], [-72.8, 44.2]]},
        }],
    }), encoding="utf-8")
    (trip / "day-2.geojson").write_text(json.dumps({
        "type": "MultiLineString",
        "coordinates": [[[-72.8, 44.2, 3000], [-72.8, 44.25, 3300]], [[-72.8, 44.25, 3300], [-72.7, 44.3, 3100]]],
    }), encoding="utf-8")
    return tmp_path


class TestReportCommand:

    def test_console(self, data_dir):
        result = CliRunner().invoke(cli, ["report", "long-trail", "--data-root", str(data_dir)])

        assert result.exit_code == 0, result.output
        assert "Long Trail" in result.output
        assert "25.9 mi" in result.output
        assert "5,900 ft" in result.output
        assert "228 ft/mi" in result.output
        assert "Failed to load (HTTP 404)" in result.output

    def test_json(self, data_dir):
        result = CliRunner().invoke(
            cli,
            ["--log-level", "CRITICAL", "report", "long-trail", "--data-root", str(data_dir), "--output", "json"],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["totals"]["total_elevation"] == 5900.0
        assert [d["ok"] for d in data["days"]] == [True, True, False]
        assert data["days"][0]["geometry"] is None

    def test_output_file(self, data_dir, tmp_path):
        out = tmp_path / "reports" / "trail.json"
        result = CliRunner().invoke(cli, [
            "report", "long-trail", "--data-root", str(data_dir),
            "--output-file", str(out), "--geometry",
        ])

        assert result.exit_code == 0, result.output
        saved = json.loads(out.read_text(encoding="utf-8"))
        assert saved["days"][1]["geometry"]["type"] == "MultiLineString"

    def test_missing_trip(self, data_dir):
        result = CliRunner().invoke(cli, ["report", "nowhere", "--data-root", str(data_dir)])

        assert result.exit_code == 1
        assert "Could not load trip metadata" in result.output


class TestMetricsCommand:

    def test_metrics(self, data_dir):
        path = data_dir / "long-trail" / "day-2.geojson"
        result = CliRunner().invoke(cli, ["metrics", str(path)])

        assert result.exit_code == 0, result.output
        assert "Points:         4" in result.output
        # +300, then a descent of 200
        assert "Elevation gain: 300 ft" in result.output

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.geojson"
        path.write_text("{", encoding="utf-8")
        result = CliRunner().invoke(cli, ["metrics", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

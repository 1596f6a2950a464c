"""
Tests for the trips API.

The data client is swapped for one backed by httpx.MockTransport.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from trip_journal.api.v1.routes.trips import get_trip_client
from trip_journal.features.trips import TripDataClient
from trip_journal.main import app

DATA_ROOT = "https://trips.test/data"

RESOURCES = {
    "/data/long-trail/meta.json": {
        "title": "Long Trail",
        "days": [
            "day-1.geojson",
            {"file": "day-2.geojson", "distance_miles": 11.7, "elevation_gain_ft": 2100},
            "day-3.geojson",
        ],
    },
    "/data/long-trail/day-1.geojson": {
        "type": "Feature",
        "properties": {"day": 1, "distance_miles": 14.2, "elevation_gain_ft": 3800},
        "geometry": {"type": "LineString", "coordinates": [[-72.8, 44.0, 1000], [-72.8, 44.2, 3000]]},
    },
    "/data/long-trail/day-2.geojson": {
        "type": "LineString",
        "coordinates": [[-72.8, 44.2, 3000], [-72.7, 44.3, 2500]],
    },
    "/data/odd-trip/meta.json": {"days": ["day-1.geojson", "day-2.geojson"]},
    "/data/odd-trip/day-1.geojson": [1, 2],
    "/data/odd-trip/day-2.geojson": {
        "type": "LineString",
        "coordinates": [[-72.8, 44.2, 3000], [-72.8], [-72.7, 44.3, 3400]],
    },
    "/data/empty-trip/meta.json": {"title": "Empty"},
    "/data/broken-trip/meta.json": "oops",
}


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/data/down-trip/meta.json":
        return httpx.Response(500)
    body = RESOURCES.get(request.url.path)
    if body is None:
        return httpx.Response(404)
    return httpx.Response(200, text=json.dumps(body))


@pytest.fixture
def client():
    async def _override():
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        try:
            yield TripDataClient(DATA_ROOT, http_client=http)
        finally:
            await http.aclose()

    app.dependency_overrides[get_trip_client] = _override
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestTripsAPI:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_get_trip(self, client):
        response = client.get("/api/v1/trips/long-trail")
        assert response.status_code == 200

        data = response.json()
        assert data["title"] == "Long Trail"
        assert data["status"] == "ok"
        assert [d["index"] for d in data["days"]] == [0, 1, 2]
        assert [d["ok"] for d in data["days"]] == [True, True, False]
        assert data["days"][2]["error"] == "HTTP 404"
        assert data["days"][0]["geometry"]["type"] == "Feature"
        assert data["totals"]["total_distance_label"] == "25.9 mi"
        assert data["totals"]["total_elevation_label"] == "5,900 ft"
        assert data["totals"]["vert_per_mile_label"] == "228 ft/mi"
        assert [item["index"] for item in data["legend"]] == [0, 1]
        assert data["map_view"]["bounds"]["north"] == pytest.approx(44.3)
        assert data["start_point"] == [44.0, -72.8]

    def test_without_geometry(self, client):
        response = client.get("/api/v1/trips/long-trail", params={"geometry": False})
        assert all(d["geometry"] is None for d in response.json()["days"])

    def test_empty_day_list(self, client):
        response = client.get("/api/v1/trips/empty-trip")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "no_days"
        assert data["map_error"] == "No day files listed in meta.json."
        assert data["totals"]["vert_per_mile"] is None

    def test_missing_trip(self, client):
        response = client.get("/api/v1/trips/nowhere")
        assert response.status_code == 404
        assert "HTTP 404 fetching" in response.json()["detail"]

    def test_metadata_server_error(self, client):
        response = client.get("/api/v1/trips/down-trip")
        assert response.status_code == 502

    def test_metadata_not_an_object(self, client):
        response = client.get("/api/v1/trips/broken-trip")
        assert response.status_code == 502
        assert "expected an object" in response.json()["detail"]

    def test_day_not_an_object_fails_only_that_day(self, client):
        response = client.get("/api/v1/trips/odd-trip")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert [d["ok"] for d in data["days"]] == [False, True]
        assert data["days"][0]["error"] == "Invalid GeoJSON: expected an object"
        assert data["days"][1]["elevation"] == 400.0
        assert data["totals"]["total_elevation_label"] == "400 ft"

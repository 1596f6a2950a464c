"""Helpers for trip pipeline tests: GeoJSON builders and a fake data root."""

import asyncio
import json

import httpx

from trip_journal.features.trips import TripDataClient

DATA_ROOT = "https://trips.test/data"
TRIP_ID = "long-trail"


def line_feature(coordinates, properties=None):
    return {
        "type": "Feature",
        "properties": properties or {},
        "geometry": {"type": "LineString", "coordinates": coordinates},
    }


def feature_collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


# Roughly a mile north with 500 ft of climbing and a 100 ft dip
DAY_ONE_COORDS = [
    [-72.80, 44.000, 1000],
    [-72.80, 44.005, 1300],
    [-72.80, 44.010, 1200],
    [-72.80, 44.0145, 1500],
]

DAY_TWO_COORDS = [
    [-72.80, 44.0145, 1500],
    [-72.79, 44.020, 1800],
    [-72.78, 44.025, 1700],
]


class FakeDataRoot:
    """
    In-memory data root served through httpx.MockTransport.

    Resources map "{trip_id}/{file}" to a JSON body, an httpx.Response,
    or an exception to raise. Delays (seconds) reorder completion.
    """

    def __init__(self, resources=None, delays=None):
        self.resources = dict(resources or {})
        self.delays = dict(delays or {})
        self.requested: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def handler(self, request: httpx.Request) -> httpx.Response:
        prefix = httpx.URL(DATA_ROOT).path + "/"
        key = request.url.path[len(prefix):]
        self.requested.append(key)

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.delays.get(key)
            if delay:
                await asyncio.sleep(delay)
        finally:
            self.in_flight -= 1

        resource = self.resources.get(key)
        self.completed.append(key)

        if resource is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(resource, Exception):
            raise resource
        if isinstance(resource, httpx.Response):
            return resource
        return httpx.Response(200, text=json.dumps(resource))

    def client(self, **kwargs) -> TripDataClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return TripDataClient(DATA_ROOT, http_client=http, **kwargs)


def run(coro):
    """Drive a coroutine to completion."""
    return asyncio.run(coro)

"""
GeoJSON coordinate extraction.

Only LineString and MultiLineString geometries are considered; anything
else yields an empty coordinate list. Nothing here raises on malformed
input except compute_bounds, which has nothing to fall back to.
"""

from typing import Any, Iterable, Iterator, Optional

from trip_journal.shared.geo import is_position

from .models import DayResult, MapBounds

Coordinates = list[list[float]]


class BoundsUnavailableError(Exception):
    """No coordinates to fit the map to."""

    def __init__(self, message: str = "Could not determine route bounds."):
        super().__init__(message)


def extract_geometry_coordinates(geometry: Any) -> Coordinates:
    """
    Coordinates of a bare geometry.

    LineString coordinates are returned unchanged; MultiLineString
    segments are concatenated in listed order (the jump between segments
    is counted as route).
    """
    if not isinstance(geometry, dict):
        return []

    kind = geometry.get("type")
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list):
        return []

    if kind == "LineString":
        return list(coordinates)
    if kind == "MultiLineString":
        return [
            position
            for segment in coordinates if isinstance(segment, list)
            for position in segment
        ]
    return []


def extract_coordinates(geojson: Any) -> Coordinates:
    """
    Flat, ordered coordinate list used for metrics.

    FeatureCollection: the first feature whose geometry yields coordinates
    (features are not merged). Feature: its geometry. Otherwise the value
    is treated as a bare geometry.
    """
    if not isinstance(geojson, dict):
        return []

    kind = geojson.get("type")

    if kind == "FeatureCollection":
        for feature in geojson.get("features") or []:
            if not isinstance(feature, dict):
                continue
            coordinates = extract_geometry_coordinates(feature.get("geometry"))
            if coordinates:
                return coordinates
        return []

    if kind == "Feature":
        return extract_geometry_coordinates(geojson.get("geometry"))

    return extract_geometry_coordinates(geojson)


def first_feature_properties(geojson: Any) -> Optional[dict]:
    """Properties of the first feature, or None for bare geometries."""
    if not isinstance(geojson, dict):
        return None

    kind = geojson.get("type")
    if kind == "FeatureCollection":
        features = geojson.get("features") or []
        if not features or not isinstance(features[0], dict):
            return None
        properties = features[0].get("properties")
    elif kind == "Feature":
        properties = geojson.get("properties")
    else:
        return None

    return properties if isinstance(properties, dict) else None


def iter_all_coordinates(geojson: Any) -> Iterator[list[float]]:
    """Every line coordinate of every feature (used for map bounds)."""
    if not isinstance(geojson, dict):
        return

    kind = geojson.get("type")
    if kind == "FeatureCollection":
        for feature in geojson.get("features") or []:
            if isinstance(feature, dict):
                yield from extract_geometry_coordinates(feature.get("geometry"))
    elif kind == "Feature":
        yield from extract_geometry_coordinates(geojson.get("geometry"))
    else:
        yield from extract_geometry_coordinates(geojson)


def _lat_lon(position: Any) -> Optional[tuple[float, float]]:
    if not is_position(position):
        return None
    return position[1], position[0]


def compute_bounds(results: Iterable[DayResult]) -> MapBounds:
    """
    Bounding box over all successfully loaded days.

    Raises:
        BoundsUnavailableError: If no loaded day has any coordinate
    """
    south = west = north = east = None

    for day in results:
        if not day.ok or day.geometry is None:
            continue
        for position in iter_all_coordinates(day.geometry):
            point = _lat_lon(position)
            if point is None:
                continue
            lat, lon = point
            if south is None:
                south = north = lat
                west = east = lon
                continue
            south = min(south, lat)
            north = max(north, lat)
            west = min(west, lon)
            east = max(east, lon)

    if south is None:
        raise BoundsUnavailableError()

    return MapBounds(south=south, west=west, north=north, east=east)


def route_endpoints(
    results: Iterable[DayResult],
) -> tuple[Optional[tuple[float, float]], Optional[tuple[float, float]]]:
    """
    (lat, lon) of the first point of the trip and the last point.

    Start is taken from the first loaded day with coordinates, end from
    the last one.
    """
    start = None
    end = None

    for day in results:
        if not day.ok:
            continue
        points = [p for p in map(_lat_lon, extract_coordinates(day.geometry)) if p]
        if not points:
            continue
        if start is None:
            start = points[0]
        end = points[-1]

    return start, end

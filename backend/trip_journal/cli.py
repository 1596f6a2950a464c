"""
CLI interface for trip reports.

Usage:
    trip-journal report appalachian-trail
    trip-journal report appalachian-trail --data-root https://example.com/data --output json
    trip-journal metrics data/appalachian-trail/day-1.geojson
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from trip_journal.config import settings
from trip_journal.features.trips import (
    TripDataClient,
    TripMetadataError,
    TripService,
    calculate_route_metrics,
    extract_coordinates,
)
from trip_journal.report import ReportGenerator
from trip_journal.shared.formatters import format_distance_mi, format_elevation_ft


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
def cli(log_level):
    """Trip Journal tools."""
    logging.basicConfig(
        level=getattr(logging, (log_level or settings.log_level).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@cli.command()
@click.argument("trip_id")
@click.option("--data-root", default=None, help="Base URL or directory (default: DATA_ROOT)")
@click.option(
    "--output",
    default="console",
    type=click.Choice(["console", "json"]),
    help="Output format"
)
@click.option("--output-file", default=None, type=click.Path(), help="Write JSON to this file")
@click.option("--geometry/--no-geometry", default=False, help="Include raw GeoJSON in JSON output")
def report(trip_id, data_root, output, output_file, geometry):
    """Load a trip and print its day table and totals."""
    asyncio.run(_run_report(trip_id, data_root, output, output_file, geometry))


async def _run_report(
    trip_id: str,
    data_root: str | None,
    output: str,
    output_file: str | None,
    geometry: bool,
):
    """Async implementation of report command."""
    async with TripDataClient(data_root or settings.data_root) as client:
        try:
            trip_report = await TripService(client).load_trip(trip_id)
        except TripMetadataError as e:
            click.echo(f"Could not load trip metadata: {e}", err=True)
            sys.exit(1)

    generator = ReportGenerator()

    if output == "console":
        click.echo(generator.generate_console(trip_report))
    else:
        click.echo(json.dumps(
            generator.generate_json(trip_report, include_geometry=geometry),
            indent=2,
            ensure_ascii=False,
        ))

    if output_file:
        path = Path(output_file)
        generator.save_json(trip_report, path, include_geometry=geometry)
        click.echo(f"JSON saved: {path}", err=True)


@cli.command()
@click.argument("geojson_file", type=click.Path(exists=True, dir_okay=False))
def metrics(geojson_file):
    """Compute distance and elevation gain from a GeoJSON file's coordinates."""
    try:
        with open(geojson_file, encoding="utf-8") as f:
            geojson = json.load(f)
    except ValueError as e:
        raise click.ClickException(f"Invalid JSON: {e}")

    coordinates = extract_coordinates(geojson)
    result = calculate_route_metrics(coordinates)

    click.echo(f"Points:         {len(coordinates)}")
    click.echo(f"Distance:       {format_distance_mi(result.distance_miles)}")
    click.echo(f"Elevation gain: {format_elevation_ft(result.elevation_gain_ft)}")


if __name__ == "__main__":
    cli()

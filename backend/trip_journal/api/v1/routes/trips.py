"""
Trip Routes

Endpoints that expose the trip pipeline to trip pages.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from trip_journal.config import settings
from trip_journal.features.trips import (
    TripDataClient,
    TripMetadataError,
    TripReportSchema,
    TripService,
)

router = APIRouter()


async def get_trip_client(request: Request):
    """Data client sharing the app-wide httpx.AsyncClient."""
    client = TripDataClient(
        settings.data_root,
        http_client=getattr(request.app.state, "http_client", None),
    )
    try:
        yield client
    finally:
        await client.close()


@router.get("/{trip_id}", response_model=TripReportSchema)
async def get_trip(
    trip_id: str,
    geometry: bool = Query(True, description="Include raw GeoJSON per day"),
    client: TripDataClient = Depends(get_trip_client),
):
    """
    Get the full trip report.

    Day list in declaration order (failed days included), trip totals,
    legend and map view. An empty day list or a trip with nothing to
    draw is reported through `status` and `map_error`.
    """
    service = TripService(client)

    try:
        report = await service.load_trip(trip_id)
    except TripMetadataError as e:
        status_code = 404 if e.status_code == 404 else 502
        raise HTTPException(
            status_code=status_code,
            detail=f"Could not load trip metadata: {e}",
        )

    return TripReportSchema.from_report(report, include_geometry=geometry)

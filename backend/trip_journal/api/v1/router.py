"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from trip_journal.api.v1.routes import trips

api_router = APIRouter()

api_router.include_router(trips.router, prefix="/trips", tags=["Trips"])

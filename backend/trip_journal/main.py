"""
Trip Journal API

FastAPI application serving trip reports (day routes, distance and
elevation totals) to trip pages.
"""

from contextlib import asynccontextmanager
import logging
from pathlib import Path
import sys

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from trip_journal import __version__
from trip_journal.config import settings
from trip_journal.api.v1.router import api_router
from trip_journal.features.trips.client import is_remote


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logger.info("Starting Trip Journal API...")
    logger.info(f"Data root: {settings.data_root}")
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.request_timeout,
        follow_redirects=True,
    )

    yield

    # Shutdown
    await app.state.http_client.aclose()
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Trip Journal API",
    description="Per-day hiking routes with distance and elevation totals",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# === Static Files (trip data) ===
if settings.serve_data and not is_remote(settings.data_root):
    _data_dir = Path(settings.data_root)
    if _data_dir.is_dir():
        app.mount("/data", StaticFiles(directory=str(_data_dir)), name="data")
        logger.info(f"Serving trip data from {_data_dir}")

"""
Trip data client.

Fetches meta.json and per-day GeoJSON documents from the data root.
The data root is either an http(s) base URL or a local directory;
both behave the same from the caller's point of view, including error
messages ("HTTP 404", "Invalid JSON: ...").
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from trip_journal.config import settings
from trip_journal.shared.constants import META_FILENAME

from .schemas import TripMeta

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class TripDataError(Exception):
    """Base error for fetching trip resources."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResourceNotFoundError(TripDataError):
    """Resource does not exist (404)."""

    def __init__(self, message: str = "HTTP 404"):
        super().__init__(message, status_code=404)


class ResourceFetchError(TripDataError):
    """Non-success status or transport failure."""
    pass


class ResourceParseError(TripDataError):
    """Body is not valid JSON or not the expected shape."""
    pass


class TripMetadataError(TripDataError):
    """meta.json could not be loaded; the trip cannot be shown at all."""
    pass


# =============================================================================
# Client
# =============================================================================

def is_remote(data_root: str) -> bool:
    return data_root.startswith(("http://", "https://"))


class TripDataClient:
    """
    Async reader for trip resources.

    Usage:
        async with TripDataClient("https://example.com/data") as client:
            meta = await client.get_meta("appalachian-trail")
            geojson = await client.get_day_geometry("appalachian-trail", "day-1.geojson")

    An httpx.AsyncClient can be passed in (shared by the API app, or a
    MockTransport in tests); otherwise one is created and closed by the
    context manager.
    """

    def __init__(
        self,
        data_root: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        root = data_root if data_root is not None else settings.data_root
        self.data_root = root.rstrip("/") or root
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._http = http_client
        self._owns_http = False

    @property
    def remote(self) -> bool:
        return is_remote(self.data_root)

    async def __aenter__(self) -> "TripDataClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None
            self._owns_http = False

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
            self._owns_http = True
        return self._http

    # -------------------------------------------------------------------------
    # Locations
    # -------------------------------------------------------------------------

    def resource_url(self, trip_id: str, filename: str) -> str:
        """{data_root}/{trip_id}/{filename}"""
        if self.remote:
            return f"{self.data_root}/{quote(trip_id)}/{quote(filename, safe='/')}"
        return f"{self.data_root}/{trip_id}/{filename}"

    def _local_path(self, trip_id: str, filename: str) -> Path:
        root = Path(self.data_root).resolve()
        path = (root / trip_id / filename).resolve()
        # Keep reads inside the data root ("../" in a filename)
        if root != path and root not in path.parents:
            raise ResourceNotFoundError()
        return path

    # -------------------------------------------------------------------------
    # Fetching
    # -------------------------------------------------------------------------

    async def _fetch_remote(self, url: str) -> Any:
        try:
            response = await self._get_http().get(url)
        except httpx.TimeoutException:
            raise ResourceFetchError("Request timed out")
        except httpx.HTTPError as e:
            raise ResourceFetchError(str(e) or type(e).__name__)

        if response.status_code == 404:
            raise ResourceNotFoundError()
        if not response.is_success:
            raise ResourceFetchError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ResourceParseError(f"Invalid JSON: {e}")

    async def _fetch_local(self, trip_id: str, filename: str) -> Any:
        path = self._local_path(trip_id, filename)
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise ResourceNotFoundError()
        except OSError as e:
            raise ResourceFetchError(e.strerror or str(e))

        try:
            return json.loads(content)
        except ValueError as e:
            raise ResourceParseError(f"Invalid JSON: {e}")

    async def fetch_json(self, trip_id: str, filename: str) -> Any:
        """
        Fetch and parse one JSON resource of a trip.

        Raises:
            ResourceNotFoundError: If the resource does not exist
            ResourceFetchError: If the transfer failed
            ResourceParseError: If the body is not JSON
        """
        if self.remote:
            return await self._fetch_remote(self.resource_url(trip_id, filename))
        return await self._fetch_local(trip_id, filename)

    async def get_meta(self, trip_id: str) -> TripMeta:
        """
        Load {trip_id}/meta.json.

        Raises:
            TripMetadataError: On any failure; keeps the status code of the cause
        """
        url = self.resource_url(trip_id, META_FILENAME)
        try:
            data = await self.fetch_json(trip_id, META_FILENAME)
        except TripDataError as e:
            message = str(e)
            if e.status_code is not None:
                message = f"HTTP {e.status_code} fetching {url}"
            raise TripMetadataError(message, status_code=e.status_code) from e

        if not isinstance(data, dict):
            raise TripMetadataError(f"Invalid metadata in {url}: expected an object")

        try:
            return TripMeta.model_validate(data)
        except ValidationError as e:
            raise TripMetadataError(
                f"Invalid metadata in {url}: {e.error_count()} invalid field(s)"
            ) from e

    async def get_day_geometry(self, trip_id: str, filename: str) -> Any:
        """Load one day's GeoJSON document (see fetch_json for errors)."""
        return await self.fetch_json(trip_id, filename)

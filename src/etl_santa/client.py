"""Wrapper around the public Santa tracker HTTP API."""

from __future__ import annotations

from typing import Optional, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from .config import Settings
from .errors import UpstreamRequestError, UpstreamSchemaError
from .models import FlightSummary, WaypointRoute

LOGGER = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SantaApiClient:
    """Fetches and validates tracker payloads. One request per call, no retries."""

    def __init__(self, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "SantaApiClient":
        self._client = httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_summary(self) -> FlightSummary:
        """Fetch the flight status summary."""
        return await self._get_typed(self._settings.info_url, FlightSummary)

    async def fetch_route(self, url: str) -> WaypointRoute:
        """Fetch the detailed stop schedule behind a route reference."""
        return await self._get_typed(url, WaypointRoute)

    async def _get_typed(self, url: str, model: Type[ModelT]) -> ModelT:
        if not self._client:
            raise RuntimeError("SantaApiClient must be used as an async context manager")

        LOGGER.info("santa.fetch.start", url=url, model=model.__name__)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            LOGGER.error("santa.fetch.failed", url=url, status_code=exc.response.status_code)
            raise UpstreamRequestError(
                url,
                f"Tracker API returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            LOGGER.error("santa.fetch.failed", url=url, error=str(exc))
            raise UpstreamRequestError(url, f"Tracker API request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            LOGGER.error("santa.fetch.invalid_json", url=url)
            raise UpstreamSchemaError(url, "Tracker API returned invalid JSON") from exc

        try:
            parsed = model.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("santa.fetch.invalid_payload", url=url, errors=exc.error_count())
            raise UpstreamSchemaError(url, f"Unexpected {model.__name__} payload: {exc}") from exc

        LOGGER.info("santa.fetch.success", url=url, model=model.__name__)
        return parsed

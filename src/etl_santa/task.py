"""ETL task adapter: fetch the feed, resolve Santa, submit the feature collection."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

import httpx
import structlog

from .client import SantaApiClient
from .config import Settings, TaskInput, TaskOutput
from .models import PositionRecord, feature_collection
from .resolver import prelaunch_position, resolve_position

LOGGER = structlog.get_logger(__name__)

Submitter = Callable[[dict[str, Any]], Awaitable[None]]


class SchemaType(str, Enum):
    INPUT = "input"
    OUTPUT = "output"


class SantaTask:
    """Single poll of the tracker, handed to the host's submit capability."""

    name = "etl-santa"

    def __init__(
        self,
        settings: Settings,
        submit: Submitter,
        *,
        now: Optional[datetime] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._submit = submit
        self._now = now
        self._transport = transport

    def schema(self, kind: SchemaType = SchemaType.INPUT) -> dict[str, Any]:
        """JSON schema for the host's input form or feature metadata."""
        if kind == SchemaType.INPUT:
            return TaskInput.model_json_schema()
        return TaskOutput.model_json_schema()

    async def control(self) -> dict[str, Any]:
        """Run one poll and submit its feature collection."""
        async with SantaApiClient(self._settings, transport=self._transport) as client:
            record = await self.locate(client)

        collection = feature_collection([record] if record else [])
        if self._settings.debug:
            LOGGER.info("santa.features", collection=collection)

        await self._submit(collection)
        LOGGER.info("santa.submitted", features=len(collection["features"]))
        return collection

    async def locate(self, client: SantaApiClient) -> Optional[PositionRecord]:
        """Fetch what is needed and resolve the current position."""
        summary = await client.fetch_summary()
        now = self._now or summary.server_now
        LOGGER.debug(
            "santa.summary",
            status=summary.status,
            now=now.isoformat(),
            takeoff=summary.launch_time.isoformat(),
            routes=len(summary.route),
        )

        record = prelaunch_position(now, summary.launch_time)
        if record is not None:
            LOGGER.info("santa.position.prelaunch", takeoff=summary.launch_time.isoformat())
            return record

        if not summary.route:
            LOGGER.info("santa.route.missing")
            return None

        route = await client.fetch_route(summary.route[0])
        record = resolve_position(summary, route.destinations, now=self._now)
        if record is None:
            LOGGER.info("santa.position.none", stops=len(route.destinations))
        else:
            LOGGER.info("santa.position.resolved", lng=record.lng, lat=record.lat, remarks=record.remarks)
        return record

"""Models for the tracker feed and the position we publish."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .schedule import from_epoch_ms

CALLSIGN = "Santa"
ENTITY_ID = "santa"
PHOTO_MIME = "text/html"


class FeedModel(BaseModel):
    """Base for immutable payloads read from the tracker API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FlightSummary(FeedModel):
    """Flight status returned by the ``/info`` endpoint."""

    status: str
    version: str = Field(alias="v")
    now: int
    takeoff: int
    duration: int
    location: str
    route: Tuple[str, ...] = ()

    @property
    def server_now(self) -> datetime:
        return from_epoch_ms(self.now)

    @property
    def launch_time(self) -> datetime:
        return from_epoch_ms(self.takeoff)


class Coordinate(FeedModel):
    lat: float
    lng: float


class Photo(FeedModel):
    url: str


class WaypointDetails(FeedModel):
    timezone: int
    photos: Tuple[Photo, ...] = ()


class Waypoint(FeedModel):
    """A scheduled stop. Timestamps only carry month, day and time of day."""

    id: str
    arrival: int
    departure: int
    population: int
    presents_delivered: int = Field(alias="presentsDelivered")
    city: str
    region: str
    location: Coordinate
    details: WaypointDetails


class WaypointRoute(FeedModel):
    """Payload behind each entry of :attr:`FlightSummary.route`."""

    destinations: Tuple[Waypoint, ...] = ()


@dataclass(frozen=True)
class PhotoLink:
    url: str
    remarks: str
    mime_type: str = PHOTO_MIME

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "mime": self.mime_type, "remarks": self.remarks}


@dataclass(frozen=True)
class PositionRecord:
    """The single point published for Santa on each poll."""

    lng: float
    lat: float
    remarks: Optional[str] = None
    photo_links: Optional[Tuple[PhotoLink, ...]] = None
    id: str = ENTITY_ID
    display_name: str = CALLSIGN

    @property
    def coordinates(self) -> list[float]:
        return [self.lng, self.lat]

    def to_feature(self) -> dict[str, Any]:
        """Render the record as a GeoJSON point feature."""
        properties: dict[str, Any] = {"callsign": self.display_name}
        if self.remarks is not None:
            properties["remarks"] = self.remarks
        if self.photo_links is not None:
            properties["links"] = [link.to_dict() for link in self.photo_links]

        return {
            "id": self.id,
            "type": "Feature",
            "properties": properties,
            "geometry": {
                "type": "Point",
                "coordinates": self.coordinates,
            },
        }


def feature_collection(records: list[PositionRecord]) -> dict[str, Any]:
    """Wrap zero or more records into the collection handed to the host."""
    return {
        "type": "FeatureCollection",
        "features": [record.to_feature() for record in records],
    }

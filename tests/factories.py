"""Payload builders shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from etl_santa.models import FlightSummary, Waypoint

TOKYO = {"lat": 35.6762, "lng": 139.6503}
SEOUL = {"lat": 37.5665, "lng": 126.9780}


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def waypoint_payload(
    city: str,
    region: str,
    location: dict[str, float],
    arrival: datetime,
    departure: datetime,
    photos: int = 0,
    population: int = 1000,
) -> dict[str, Any]:
    return {
        "id": city.lower(),
        "arrival": epoch_ms(arrival),
        "departure": epoch_ms(departure),
        "population": population,
        "presentsDelivered": population * 2,
        "city": city,
        "region": region,
        "location": location,
        "details": {
            "timezone": 32400,
            "photos": [{"url": f"https://example.com/{city.lower()}/{i}"} for i in range(photos)],
        },
    }


def make_waypoint(*args: Any, **kwargs: Any) -> Waypoint:
    return Waypoint.model_validate(waypoint_payload(*args, **kwargs))


def summary_payload(now: datetime, takeoff: datetime, route: list[str] | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "status": "OK",
        "v": "1.0",
        "now": epoch_ms(now),
        "takeoff": epoch_ms(takeoff),
        "duration": 90000000,
        "location": "35.6762,139.6503",
    }
    if route is not None:
        payload["route"] = route
    return payload


def make_summary(*args: Any, **kwargs: Any) -> FlightSummary:
    return FlightSummary.model_validate(summary_payload(*args, **kwargs))


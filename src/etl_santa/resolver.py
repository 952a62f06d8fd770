"""Work out where Santa is from the flight summary and the route schedule."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional

import structlog

from .geometry import leg_fraction, point_along
from .models import Coordinate, FlightSummary, PhotoLink, PositionRecord, Waypoint
from .schedule import Stop

LOGGER = structlog.get_logger(__name__)

# Shown until takeoff.
HOME_BASE = Coordinate(lat=90.0, lng=90.0)


def prelaunch_position(now: datetime, launch_time: datetime) -> Optional[PositionRecord]:
    """Park Santa at home base while ``now`` is before ``launch_time``."""
    if now < launch_time:
        return PositionRecord(lng=HOME_BASE.lng, lat=HOME_BASE.lat)
    return None


def scan_waypoints(
    now: datetime,
    waypoints: Iterable[Waypoint],
    year: Optional[int] = None,
) -> Optional[PositionRecord]:
    """
    Find the stop Santa is at, or the leg being flown, at ``now``.

    Waypoints are walked strictly in the order given, paired with the stop
    before them. The first stop whose window contains ``now`` wins, otherwise
    the first upcoming stop that has a predecessor gives the leg in flight.
    Returns ``None`` once the route is exhausted. Stops are pinned in UTC, so
    the reference year is taken from ``now`` in UTC whatever its offset.
    """
    now = now.astimezone(timezone.utc)
    year = now.year if year is None else year
    stops: List[Stop] = [Stop.pin(waypoint, year) for waypoint in waypoints]
    previous_stops: List[Optional[Stop]] = [None, *stops]

    for previous, current in zip(previous_stops, stops):
        if current.is_present(now):
            return at_rest(current.waypoint)
        if previous is not None and current.is_upcoming(now):
            return in_transit(previous, current, now)

    LOGGER.debug("santa.route.exhausted", stops=len(stops), now=now.isoformat())
    return None


def at_rest(waypoint: Waypoint) -> PositionRecord:
    place = f"{waypoint.city}, {waypoint.region}"
    links = tuple(
        PhotoLink(url=photo.url, remarks=f"Photo of {place} #{index}")
        for index, photo in enumerate(waypoint.details.photos)
    )
    return PositionRecord(
        lng=waypoint.location.lng,
        lat=waypoint.location.lat,
        remarks=f"Delivering presents in {place}\nPopulation: {waypoint.population}",
        photo_links=links,
    )


def in_transit(previous: Stop, current: Stop, now: datetime) -> PositionRecord:
    fraction = leg_fraction(previous.departure, current.arrival, now)
    lng, lat = point_along(previous.waypoint.location, current.waypoint.location, fraction)
    origin = previous.waypoint
    destination = current.waypoint
    return PositionRecord(
        lng=lng,
        lat=lat,
        remarks=(
            f"in transit from {origin.city},{origin.region} "
            f"to {destination.city},{destination.region}"
        ),
    )


def resolve_position(
    summary: FlightSummary,
    waypoints: Iterable[Waypoint],
    now: Optional[datetime] = None,
) -> Optional[PositionRecord]:
    """
    Resolve Santa's position without any I/O.

    ``now`` overrides the server clock in ``summary``; the schedule is pinned
    to the UTC year of whichever instant is used.
    """
    moment = now or summary.server_now
    record = prelaunch_position(moment, summary.launch_time)
    if record is not None:
        return record
    return scan_waypoints(moment, waypoints)

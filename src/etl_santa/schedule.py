"""Helpers for turning the tracker's yearless schedule into real instants."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Waypoint

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_epoch_ms(value: int) -> datetime:
    """Convert epoch milliseconds into an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=value)


def normalise_year(moment: datetime, year: int) -> datetime:
    """
    Move ``moment`` into ``year`` keeping month, day and time of day.

    The upstream schedule repeats every December without a meaningful year, so
    every stop has to be pinned to the year being tracked before it can be
    compared with the server clock. A 29 February that lands in a common year
    rolls over to 1 March.

    Legs that cross midnight on 31 December are not handled: both ends are
    pinned to the same year.
    """
    try:
        return moment.replace(year=year)
    except ValueError:
        return moment.replace(year=year, month=3, day=1)


def normalise_epoch_ms(value: int, year: int) -> datetime:
    return normalise_year(from_epoch_ms(value), year)


@dataclass(frozen=True)
class Stop:
    """A waypoint with its arrival and departure pinned to a reference year."""

    waypoint: Waypoint
    arrival: datetime
    departure: datetime

    @classmethod
    def pin(cls, waypoint: Waypoint, year: int) -> "Stop":
        return cls(
            waypoint=waypoint,
            arrival=normalise_epoch_ms(waypoint.arrival, year),
            departure=normalise_epoch_ms(waypoint.departure, year),
        )

    def is_present(self, now: datetime) -> bool:
        return self.arrival <= now <= self.departure

    def is_upcoming(self, now: datetime) -> bool:
        return now < self.arrival

"""Straight-line interpolation between two stops."""

from __future__ import annotations

from datetime import datetime
from typing import Tuple

from shapely.geometry import LineString, Point

from .models import Coordinate


def leg_fraction(departed: datetime, arriving: datetime, now: datetime) -> float:
    """Share of the leg flown at ``now``, clamped to ``[0, 1]``."""
    total = arriving - departed
    if total.total_seconds() <= 0:
        return 1.0
    fraction = (now - departed) / total
    return min(max(fraction, 0.0), 1.0)


def point_along(start: Coordinate, end: Coordinate, fraction: float) -> Tuple[float, float]:
    """
    Return the ``(lng, lat)`` point at ``fraction`` of the path from ``start`` to ``end``.

    The path is the straight line in longitude/latitude space; no great circle
    correction is applied.
    """
    path = LineString([(start.lng, start.lat), (end.lng, end.lat)])
    if path.length == 0:
        return start.lng, start.lat

    point: Point = path.interpolate(fraction * path.length)
    return point.x, point.y

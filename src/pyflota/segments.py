"""Day timeline of a route, split into stops and travel legs.

Every route shares one fixed schedule of four stops and three travel legs.
Stops are pinned to route points and travel legs cover consecutive thirds
of the route, so the timeline always lines up with the drawn path.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from pyflota.lifecycle import RouteInput, route_points
from pyflota.models.route import RouteSegment, SegmentKind


class _ScheduleEntry(NamedTuple):
    kind: SegmentKind
    start: str
    end: str
    duration: str
    location: str | None = None
    distance: str = ""


DAY_SCHEDULE: tuple[_ScheduleEntry, ...] = (
    _ScheduleEntry(SegmentKind.STOP, "08:00:00", "10:15:00", "2 hrs 15 min", "Calle 5 de Febrero 567, Jardines..."),
    _ScheduleEntry(SegmentKind.TRAVEL, "10:15:00", "10:40:00", "25 min", distance="8.5 Km"),
    _ScheduleEntry(SegmentKind.STOP, "10:40:00", "12:00:00", "1 hr 20 min", "Plaza Tapatía, Centro Histórico..."),
    _ScheduleEntry(SegmentKind.TRAVEL, "12:00:00", "12:35:00", "35 min", distance="12.3 Km"),
    _ScheduleEntry(SegmentKind.STOP, "12:35:00", "13:20:00", "45 min", "Mercado San Juan de Dios, Cen..."),
    _ScheduleEntry(SegmentKind.TRAVEL, "13:20:00", "13:38:00", "18 min", distance="6.7 Km"),
    _ScheduleEntry(SegmentKind.STOP, "13:38:00", "17:00:00", "3 hrs 22 min", "Parque Metropolitano, Zona In..."),
)

_TRAVEL_LEGS = sum(1 for entry in DAY_SCHEDULE if entry.kind == SegmentKind.TRAVEL)


def _stop_point(points: list[tuple[float, float]], position: int) -> tuple[float, float]:
    if position == 0:
        return points[0]
    if position == len(DAY_SCHEDULE) - 1:
        return points[-1]
    return points[math.floor(position / len(DAY_SCHEDULE) * len(points))]


def _travel_slice(points: list[tuple[float, float]], leg: int) -> list[tuple[float, float]]:
    last = len(points) - 1
    start = math.floor(leg / _TRAVEL_LEGS * last)
    end = math.floor((leg + 1) / _TRAVEL_LEGS * last) + 1
    return points[start:end]


def generate_segments(route: RouteInput) -> list[RouteSegment]:
    """Split *route* into the day's stops and travel legs.

    Returns an empty list for an empty route.
    """
    points = route_points(route)
    if not points:
        return []

    segments: list[RouteSegment] = []
    for position, entry in enumerate(DAY_SCHEDULE):
        if entry.kind == SegmentKind.STOP:
            name = f"Parada {position // 2 + 1}"
            coordinates = [_stop_point(points, position)]
        else:
            name = "Traslado"
            coordinates = _travel_slice(points, position // 2)
        segments.append(
            RouteSegment(
                index=position,
                name=name,
                kind=entry.kind,
                coordinates=tuple(coordinates),
                duration=entry.duration,
                time_range=f"{entry.start} - {entry.end}",
                distance=entry.distance,
                location=entry.location,
            )
        )
    return segments

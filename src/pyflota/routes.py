"""Stylized synthetic routes.

Each route follows one of six geometric patterns picked by
``base_index % 6``.  Draws come from a counter local to the call that
starts at ``base_index * 1000``, so routes are reproducible and
independent of one another.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator

from pyflota.config import DEFAULT_CONFIG, FlotaConfig
from pyflota.models.route import Route, RouteMarker, RoutePattern
from pyflota.seeding import scalar

PATTERN_ORDER: tuple[RoutePattern, ...] = (
    RoutePattern.HIGHWAY,
    RoutePattern.RADIAL,
    RoutePattern.ARC,
    RoutePattern.SERPENTINE,
    RoutePattern.STRAIGHT_LONG,
    RoutePattern.URBAN_PATH,
)

WEEKDAYS: tuple[str, ...] = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo")
ROUTE_MONTH_LABEL = "Septiembre"

_KM_PER_POINT = 8
_DISTANCE_MULTIPLIER: dict[RoutePattern, float] = {
    RoutePattern.HIGHWAY: 1.5,
    RoutePattern.URBAN_PATH: 1.2,
}
_START_SPAN_DEG = 0.12
_TWO_PI = math.pi * 2
_QUARTER_TURN = 1.57

Point = tuple[float, float]


def _draws(base_index: int) -> Iterator[float]:
    for counter in itertools.count(base_index * 1000 + 1):
        yield scalar(counter)


def _walk(
    draw: Iterator[float],
    start: Point,
    heading: float,
    segments: int,
    min_length: float,
    length_span: float,
    turn_span: float,
    *,
    cumulative: bool,
) -> list[Point]:
    """Step away from *start*, one segment per point.

    With ``cumulative`` the heading drifts; otherwise each step wobbles
    around the initial heading.
    """
    lat, lng = start
    points: list[Point] = []
    for _ in range(segments):
        length = min_length + next(draw) * length_span
        turn = (next(draw) - 0.5) * turn_span
        if cumulative:
            heading += turn
            step_heading = heading
        else:
            step_heading = heading + turn
        lat += math.cos(step_heading) * length
        lng += math.sin(step_heading) * length
        points.append((lat, lng))
    return points


def _urban_path(draw: Iterator[float], start: Point) -> list[Point]:
    segments = 12 + math.floor(next(draw) * 8)
    lat, lng = start
    heading = next(draw) * _TWO_PI
    points: list[Point] = []
    for _ in range(segments):
        length = 0.008 + next(draw) * 0.006
        heading += (next(draw) - 0.5) * 0.6
        lat += math.cos(heading) * length
        lng += math.sin(heading) * length
        points.append((lat, lng))
        # Occasional right-angle turn at an intersection.
        if next(draw) > 0.8:
            heading += _QUARTER_TURN if next(draw) > 0.5 else -_QUARTER_TURN
    return points


def _radial(draw: Iterator[float], start: Point) -> list[Point]:
    heading = next(draw) * _TWO_PI
    segments = 12 + math.floor(next(draw) * 8)
    points: list[Point] = []
    for i in range(segments):
        distance = 0.006 + i * 0.005
        points.append((start[0] + math.cos(heading) * distance, start[1] + math.sin(heading) * distance))
    return points


def _arc(draw: Iterator[float], start: Point) -> list[Point]:
    radius = 0.05 + next(draw) * 0.04
    start_angle = next(draw) * _TWO_PI
    span = math.pi * (0.5 + next(draw) * 0.6)
    count = 18 + math.floor(next(draw) * 12)
    points: list[Point] = []
    for i in range(count):
        angle = start_angle + (i / (count - 1)) * span
        points.append((start[0] + math.cos(angle) * radius, start[1] + math.sin(angle) * radius))
    return points


def _coordinates(pattern: RoutePattern, draw: Iterator[float], start: Point) -> list[Point]:
    if pattern == RoutePattern.HIGHWAY:
        heading = next(draw) * _TWO_PI
        segments = 15 + math.floor(next(draw) * 10)
        return _walk(draw, start, heading, segments, 0.008, 0.006, 0.3, cumulative=False)
    if pattern == RoutePattern.URBAN_PATH:
        return _urban_path(draw, start)
    if pattern == RoutePattern.RADIAL:
        return _radial(draw, start)
    if pattern == RoutePattern.ARC:
        return _arc(draw, start)
    if pattern == RoutePattern.SERPENTINE:
        segments = 20 + math.floor(next(draw) * 15)
        heading = next(draw) * _TWO_PI
        return _walk(draw, start, heading, segments, 0.006, 0.004, 0.8, cumulative=True)
    heading = next(draw) * _TWO_PI
    segments = 18 + math.floor(next(draw) * 12)
    return _walk(draw, start, heading, segments, 0.008, 0.004, 0.2, cumulative=False)


def generate_route(base_index: int, *, config: FlotaConfig = DEFAULT_CONFIG) -> Route:
    """Generate route number *base_index* (0-based)."""
    if base_index < 0:
        raise ValueError(f"base_index must be non-negative, got {base_index}")

    draw = _draws(base_index)
    pattern = PATTERN_ORDER[base_index % len(PATTERN_ORDER)]
    start = (
        config.base_latitude + (next(draw) - 0.5) * _START_SPAN_DEG,
        config.base_longitude + (next(draw) - 0.5) * _START_SPAN_DEG,
    )
    coordinates = _coordinates(pattern, draw, start)

    markers: tuple[RouteMarker, ...] = ()
    if coordinates:
        markers = (
            RouteMarker(position=coordinates[0], name="Inicio", stop_hours=math.floor(next(draw) * 24) + 1),
            RouteMarker(position=coordinates[-1], name="Destino", stop_hours=math.floor(next(draw) * 24) + 1),
        )

    multiplier = _DISTANCE_MULTIPLIER.get(pattern, 1.0)
    distance = len(coordinates) * _KM_PER_POINT * multiplier * (0.8 + next(draw) * 0.4)

    route_id = f"{base_index + 1:02d}"
    return Route(
        id=route_id,
        name=f"{route_id} {ROUTE_MONTH_LABEL}, {WEEKDAYS[base_index % len(WEEKDAYS)]}",
        pattern=pattern,
        coordinates=tuple(coordinates),
        markers=markers,
        distance_km=round(distance, 2),
    )


def generate_routes(count: int = 30, *, config: FlotaConfig = DEFAULT_CONFIG) -> list[Route]:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [generate_route(index, config=config) for index in range(count)]

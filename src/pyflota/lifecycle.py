"""Route-alignment composer.

Builds an :class:`~pyflota.models.lifecycle.EventLifecycle` for an event:
where and when it started and ended, and whether those points lie on the
vehicle's route.  All branch selection comes from offset scalar draws on
the event's seed, so the same inputs always produce the same record.

Branches, in priority order:

1. Empty route: start and end float freely around the base coordinate;
   the event starts at its creation timestamp and lasts 10-360 minutes.
2. Non-empty route: the event starts on one of the first 70% of route
   points, two minutes of travel per point after the route start.  Then:

   * 20%: multi-day, ending 2-8 km away off-route after 8-48 hours;
   * otherwise 70%: ends 10-50 points further along the route;
   * otherwise: ends off-route near the start after 30-240 minutes.

The composer never reads the wall clock.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime, timedelta
from typing import NamedTuple

from pyflota._constants import (
    END_LOCATION_SEED_OFFSET,
    ENDS_ON_ROUTE_PROBABILITY,
    FREE_OFFSET_SPAN_DEG,
    MINUTES_PER_ROUTE_POINT,
    MULTI_DAY_MIN_M,
    MULTI_DAY_PROBABILITY,
    MULTI_DAY_SPAN_M,
    NEAR_OFFSET_SPAN_DEG,
    OFFSET_ENDS_ON_ROUTE,
    OFFSET_EXTRA_MINUTES,
    OFFSET_FREE_END_LAT,
    OFFSET_FREE_END_LNG,
    OFFSET_FREE_MINUTES,
    OFFSET_FREE_START_LAT,
    OFFSET_FREE_START_LNG,
    OFFSET_MULTI_DAY,
    OFFSET_MULTI_DAY_BEARING,
    OFFSET_MULTI_DAY_HOURS,
    OFFSET_MULTI_DAY_MAGNITUDE,
    OFFSET_NEAR_LAT,
    OFFSET_NEAR_LNG,
    OFFSET_OFF_ROUTE_MINUTES,
    OFFSET_POINTS_AHEAD,
    OFFSET_START_INDEX,
    START_WINDOW_FRACTION,
)
from pyflota.catalogs import resolve_location
from pyflota.config import DEFAULT_CONFIG, FlotaConfig
from pyflota.events import creation_timestamp, generate_event
from pyflota.geo import destination_point, jitter
from pyflota.ids import entity_seed
from pyflota.models.lifecycle import EventLifecycle, EventWithLocation, LifecyclePoint, RouteAlignment
from pyflota.models.route import Route
from pyflota.seeding import random_int, scalar, scalar_index
from pyflota.status import resolve_status

_logger = logging.getLogger(__name__)

RouteInput = Route | Sequence[Sequence[float]]


class _End(NamedTuple):
    position: tuple[float, float]
    minutes: int
    route_index: int | None


def route_points(route: RouteInput) -> list[tuple[float, float]]:
    """Route points as ``(lat, lng)`` float tuples, in order."""
    if isinstance(route, Route):
        return route.points
    return [(float(point[0]), float(point[1])) for point in route]


def start_route_index(seed: int, route_length: int) -> int:
    """Index of the start point, drawn from the first 70% of the route."""
    window = max(1, math.floor(route_length * START_WINDOW_FRACTION))
    return scalar_index(window, seed, OFFSET_START_INDEX)


def _multi_day_end(seed: int, start: tuple[float, float]) -> _End:
    distance_m = MULTI_DAY_MIN_M + scalar(seed, OFFSET_MULTI_DAY_MAGNITUDE) * MULTI_DAY_SPAN_M
    bearing = scalar(seed, OFFSET_MULTI_DAY_BEARING) * 360
    hours = random_int(seed, 8, 48, OFFSET_MULTI_DAY_HOURS)
    return _End(destination_point(start, distance_m, bearing), hours * 60, None)


def _on_route_end(seed: int, points: list[tuple[float, float]], start_index: int) -> _End:
    points_ahead = random_int(seed, 10, 50, OFFSET_POINTS_AHEAD)
    end_index = min(start_index + points_ahead, len(points) - 1)
    minutes = points_ahead * MINUTES_PER_ROUTE_POINT + random_int(seed, 10, 120, OFFSET_EXTRA_MINUTES)
    return _End(points[end_index], minutes, end_index)


def _near_end(seed: int, start: tuple[float, float]) -> _End:
    position = jitter(start, scalar(seed, OFFSET_NEAR_LAT), scalar(seed, OFFSET_NEAR_LNG), NEAR_OFFSET_SPAN_DEG)
    return _End(position, random_int(seed, 30, 240, OFFSET_OFF_ROUTE_MINUTES), None)


def compose_lifecycle(
    event_id: str,
    route: RouteInput,
    reference_start_time: datetime,
    reference_date: date | datetime | None = None,
    *,
    config: FlotaConfig = DEFAULT_CONFIG,
) -> EventLifecycle:
    """Compose the lifecycle record of *event_id*.

    Parameters
    ----------
    event_id : str
        Event identifier.  Malformed IDs compose as seed ``0``.
    route : Route or sequence of (lat, lng)
        Ordered route points of the vehicle, possibly empty.
    reference_start_time : datetime
        When the route starts.  Route-aligned start times are offsets
        from it.
    reference_date : date or datetime, optional
        Day used for the creation timestamp when the route is empty.
        Defaults to the date of ``reference_start_time``.
    config : FlotaConfig
        Base coordinate and catalogs.

    Returns
    -------
    EventLifecycle
        Bit-identical for identical arguments.
    """
    seed = entity_seed(event_id)
    points = route_points(route)

    if not points:
        start_position = jitter(
            config.base_position,
            scalar(seed, OFFSET_FREE_START_LAT),
            scalar(seed, OFFSET_FREE_START_LNG),
            FREE_OFFSET_SPAN_DEG,
        )
        end = _End(
            jitter(
                config.base_position,
                scalar(seed, OFFSET_FREE_END_LAT),
                scalar(seed, OFFSET_FREE_END_LNG),
                FREE_OFFSET_SPAN_DEG,
            ),
            random_int(seed, 10, 360, OFFSET_FREE_MINUTES),
            None,
        )
        day = reference_date if reference_date is not None else reference_start_time
        start_time = creation_timestamp(event_id, day)
        alignment = RouteAlignment(starts_on_route=False, ends_on_route=False)
        branch = "free"
    else:
        start_index = start_route_index(seed, len(points))
        start_position = points[start_index]
        start_time = reference_start_time + timedelta(minutes=start_index * MINUTES_PER_ROUTE_POINT)

        if scalar(seed, OFFSET_MULTI_DAY) < MULTI_DAY_PROBABILITY:
            end = _multi_day_end(seed, start_position)
            branch = "multi_day"
        elif scalar(seed, OFFSET_ENDS_ON_ROUTE) < ENDS_ON_ROUTE_PROBABILITY:
            end = _on_route_end(seed, points, start_index)
            branch = "on_route"
        else:
            end = _near_end(seed, start_position)
            branch = "near"

        alignment = RouteAlignment(
            starts_on_route=True,
            ends_on_route=end.route_index is not None,
            start_route_index=start_index,
            end_route_index=end.route_index,
        )

    catalogs = config.catalogs
    lifecycle = EventLifecycle(
        event_id=event_id,
        start_location=LifecyclePoint(
            position=start_position,
            timestamp=start_time,
            name=resolve_location(seed, catalogs).label,
        ),
        end_location=LifecyclePoint(
            position=end.position,
            timestamp=start_time + timedelta(minutes=end.minutes),
            name=resolve_location(seed + END_LOCATION_SEED_OFFSET, catalogs).label,
        ),
        route_alignment=alignment,
    )
    _logger.debug(
        "Composed lifecycle id=%s branch=%s route_points=%d minutes=%d",
        event_id,
        branch,
        len(points),
        end.minutes,
    )
    return lifecycle


def generate_event_with_location(
    event_id: str,
    route: RouteInput,
    reference_start_time: datetime,
    reference_date: date | datetime | None = None,
    *,
    config: FlotaConfig = DEFAULT_CONFIG,
) -> EventWithLocation:
    """Return the event, its lifecycle and its status in one record.

    The status always comes from :func:`pyflota.status.resolve_status`.
    """
    day = reference_date if reference_date is not None else reference_start_time
    return EventWithLocation(
        event=generate_event(event_id, day, config=config),
        lifecycle=compose_lifecycle(event_id, route, reference_start_time, reference_date, config=config),
        status=resolve_status(event_id),
    )

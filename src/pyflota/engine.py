"""High-level facade over the synthetic-data generators."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, date, datetime

from pyflota.catalogs import resolve_location
from pyflota.config import FlotaConfig
from pyflota.events import generate_event
from pyflota.identity import format_callsign
from pyflota.ids import entity_seed
from pyflota.lifecycle import RouteInput, compose_lifecycle, generate_event_with_location
from pyflota.models.event import GeneratedEvent, OperationalStatus
from pyflota.models.lifecycle import EventLifecycle, EventWithLocation
from pyflota.models.location import Location
from pyflota.models.route import Route, RouteSegment
from pyflota.models.vehicle import Vehicle
from pyflota.models.zone import Zone
from pyflota.routes import generate_route, generate_routes
from pyflota.segments import generate_segments
from pyflota.status import resolve_status
from pyflota.vehicles import generate_fleet, generate_vehicle
from pyflota.zones import GUADALAJARA_ZONES, zones_containing

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class FleetSynth:
    """Synthetic fleet data bound to one configuration.

    Usage::

        synth = FleetSynth(FlotaConfig.from_env())
        card = synth.event_with_location("event-3", route.points, route_start)
        status = synth.status("event-3")

    The facade holds no per-entity state: two instances with equal
    configuration return equal records, so independently mounted views
    may each create their own.  ``clock`` is consulted only when a caller
    omits a reference time; pass reference times explicitly wherever the
    value must stay stable across renders.
    """

    def __init__(
        self,
        config: FlotaConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config if config is not None else FlotaConfig()
        self._clock = clock

    @property
    def config(self) -> FlotaConfig:
        return self._config

    def now(self) -> datetime:
        return self._clock()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def event(self, event_id: str, reference_date: date | datetime | None = None) -> GeneratedEvent:
        if reference_date is None:
            reference_date = self._clock()
            _logger.debug("No reference date for event id=%s; using clock %s", event_id, reference_date)
        return generate_event(event_id, reference_date, config=self._config)

    def status(self, event_id: str) -> OperationalStatus:
        return resolve_status(event_id)

    def lifecycle(
        self,
        event_id: str,
        route: RouteInput,
        reference_start_time: datetime | None = None,
        reference_date: date | datetime | None = None,
    ) -> EventLifecycle:
        if reference_start_time is None:
            reference_start_time = self._clock()
            _logger.debug("No route start for event id=%s; using clock %s", event_id, reference_start_time)
        return compose_lifecycle(event_id, route, reference_start_time, reference_date, config=self._config)

    def event_with_location(
        self,
        event_id: str,
        route: RouteInput,
        reference_start_time: datetime | None = None,
        reference_date: date | datetime | None = None,
    ) -> EventWithLocation:
        if reference_start_time is None:
            reference_start_time = self._clock()
            _logger.debug("No route start for event id=%s; using clock %s", event_id, reference_start_time)
        return generate_event_with_location(
            event_id,
            route,
            reference_start_time,
            reference_date,
            config=self._config,
        )

    def location(self, entity_id: str) -> Location:
        """Location label shown for *entity_id* on cards and lists."""
        return resolve_location(entity_seed(entity_id), self._config.catalogs)

    # ------------------------------------------------------------------
    # Vehicles and routes
    # ------------------------------------------------------------------

    def callsign(self, numeric_index: int) -> str:
        return format_callsign(numeric_index)

    def vehicle(self, vehicle_id: str) -> Vehicle:
        return generate_vehicle(vehicle_id, config=self._config)

    def fleet(self) -> list[Vehicle]:
        return generate_fleet(config=self._config)

    def route(self, base_index: int) -> Route:
        return generate_route(base_index, config=self._config)

    def routes(self, count: int = 30) -> list[Route]:
        return generate_routes(count, config=self._config)

    # ------------------------------------------------------------------
    # Zones and route timelines
    # ------------------------------------------------------------------

    def zones(self) -> list[Zone]:
        return list(GUADALAJARA_ZONES)

    def zones_at(self, position: tuple[float, float]) -> list[Zone]:
        """Zones whose polygon contains *position*."""
        return zones_containing(position, GUADALAJARA_ZONES)

    def segments(self, route: RouteInput) -> list[RouteSegment]:
        return generate_segments(route)

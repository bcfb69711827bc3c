"""Event lifecycle models.

An :class:`EventLifecycle` is produced only by
:func:`pyflota.lifecycle.compose_lifecycle` and is immutable for a given
``(event_id, route, reference_start_time, reference_date)``.  Nothing in
it depends on the wall clock; "elapsed so far" for open events is computed
by the caller (see :mod:`pyflota.timing`).
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import Field, model_validator

from pyflota.models._base import FlotaBaseModel, Position
from pyflota.models.event import GeneratedEvent, OperationalStatus


class LifecyclePoint(FlotaBaseModel):
    """Where and when an event started or ended."""

    position: Position
    timestamp: datetime
    name: str
    """Geofence name or street address label."""


class RouteAlignment(FlotaBaseModel):
    starts_on_route: bool
    ends_on_route: bool
    start_route_index: int | None = Field(default=None, ge=0)
    end_route_index: int | None = Field(default=None, ge=0)


class EventLifecycle(FlotaBaseModel):
    event_id: str
    start_location: LifecyclePoint
    end_location: LifecyclePoint
    route_alignment: RouteAlignment

    @model_validator(mode="after")
    def _check_order(self) -> EventLifecycle:
        if self.end_location.timestamp <= self.start_location.timestamp:
            raise ValueError("lifecycle must end after it starts")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end_location.timestamp - self.start_location.timestamp


class EventWithLocation(FlotaBaseModel):
    """Event, lifecycle and status as consumed by cards, maps and detail views."""

    event: GeneratedEvent
    lifecycle: EventLifecycle
    status: OperationalStatus

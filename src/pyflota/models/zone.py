"""Zone (named polygon geofence) model."""

from __future__ import annotations

from pydantic import Field, model_validator

from pyflota.models._base import FlotaBaseModel, Position


class Zone(FlotaBaseModel):
    """A named polygon used for spatial context on the map.

    ``ring`` holds ``(lat, lng)`` vertices of the outer boundary and is
    closed: the last vertex repeats the first.
    """

    id: str
    name: str
    ring: tuple[Position, ...]
    tags: tuple[str, ...] = ()
    visible: bool = True

    @model_validator(mode="after")
    def _check_ring(self) -> Zone:
        if len(self.ring) < 4:
            raise ValueError("zone ring needs at least three vertices plus the closing vertex")
        if self.ring[0] != self.ring[-1]:
            raise ValueError("zone ring must be closed")
        return self

    @property
    def vertices(self) -> tuple[tuple[float, float], ...]:
        """Distinct vertices, without the closing repeat."""
        return self.ring[:-1]


class ZoneOccupancy(FlotaBaseModel):
    """How many vehicles and events currently sit inside a zone."""

    zone: Zone
    vehicle_count: int = Field(default=0, ge=0)
    event_count: int = Field(default=0, ge=0)

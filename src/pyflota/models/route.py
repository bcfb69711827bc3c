"""Synthetic route model."""

from __future__ import annotations

from pydantic import Field

from pyflota.models._base import FlotaBaseModel, FlotaEnum, Position


class RoutePattern(FlotaEnum):
    HIGHWAY = "highway"
    RADIAL = "radial"
    ARC = "arc"
    SERPENTINE = "serpentine"
    STRAIGHT_LONG = "straight_long"
    URBAN_PATH = "urban_path"


class RouteMarker(FlotaBaseModel):
    position: Position
    name: str
    """``"Inicio"`` or ``"Destino"``."""
    stop_hours: int = Field(ge=1, le=24)
    is_stop: bool = True


class Route(FlotaBaseModel):
    """An ordered sequence of positions with start/destination markers."""

    id: str
    name: str
    pattern: RoutePattern
    coordinates: tuple[Position, ...]
    markers: tuple[RouteMarker, ...] = ()
    distance_km: float = Field(ge=0)

    @property
    def points(self) -> list[tuple[float, float]]:
        """Coordinates as a plain list for :func:`pyflota.lifecycle.compose_lifecycle`."""
        return list(self.coordinates)


class SegmentKind(FlotaEnum):
    STOP = "stop"
    TRAVEL = "travel"


class RouteSegment(FlotaBaseModel):
    """One stop or travel leg of a route's day timeline."""

    index: int = Field(ge=0)
    name: str
    """``"Parada <n>"`` for stops, ``"Traslado"`` for travel legs."""
    kind: SegmentKind
    coordinates: tuple[Position, ...]
    """A single position for stops; the covered route slice for travel."""
    duration: str
    time_range: str
    distance: str = ""
    location: str | None = None
    highlighted: bool = False

"""Data models for generated fleet records."""

from pyflota.models._base import FlotaBaseModel, FlotaEnum, Position
from pyflota.models.entity import EntityKind, ParsedEntityId
from pyflota.models.event import EventTemplate, GeneratedEvent, OperationalStatus, Severity
from pyflota.models.lifecycle import EventLifecycle, EventWithLocation, LifecyclePoint, RouteAlignment
from pyflota.models.location import Location, LocationKind
from pyflota.models.route import Route, RouteMarker, RoutePattern, RouteSegment, SegmentKind
from pyflota.models.vehicle import ReportFreshness, Vehicle, VehicleIdentity, VehicleState
from pyflota.models.zone import Zone, ZoneOccupancy

__all__ = [
    "EntityKind",
    "EventLifecycle",
    "EventTemplate",
    "EventWithLocation",
    "FlotaBaseModel",
    "FlotaEnum",
    "GeneratedEvent",
    "LifecyclePoint",
    "Location",
    "LocationKind",
    "OperationalStatus",
    "ParsedEntityId",
    "Position",
    "ReportFreshness",
    "Route",
    "RouteAlignment",
    "RouteMarker",
    "RoutePattern",
    "RouteSegment",
    "SegmentKind",
    "Severity",
    "Vehicle",
    "VehicleIdentity",
    "VehicleState",
    "Zone",
    "ZoneOccupancy",
]

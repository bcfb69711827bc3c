"""pyflota - Deterministic synthetic fleet data for dashboards without a backend."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyflota")
except PackageNotFoundError:
    __version__ = "0+local"
from pyflota.catalogs import DEFAULT_CATALOGS, Catalogs, resolve_from_catalog, resolve_location
from pyflota.config import FlotaConfig
from pyflota.engine import FleetSynth
from pyflota.events import generate_event
from pyflota.exceptions import FlotaCatalogError, FlotaConfigError, FlotaError
from pyflota.identity import format_callsign, vehicle_identity
from pyflota.ids import parse_entity_id
from pyflota.lifecycle import compose_lifecycle, generate_event_with_location
from pyflota.models import (
    EventLifecycle,
    EventWithLocation,
    GeneratedEvent,
    Location,
    LocationKind,
    OperationalStatus,
    Route,
    RouteSegment,
    Severity,
    Vehicle,
    VehicleIdentity,
    Zone,
)
from pyflota.seeding import derive_seed, scalar
from pyflota.segments import generate_segments
from pyflota.status import resolve_status
from pyflota.zones import GUADALAJARA_ZONES, point_in_zone, zone_bounds, zone_centroid

__all__ = [
    "__version__",
    "Catalogs",
    "DEFAULT_CATALOGS",
    "EventLifecycle",
    "EventWithLocation",
    "FleetSynth",
    "FlotaCatalogError",
    "FlotaConfig",
    "FlotaConfigError",
    "FlotaError",
    "GUADALAJARA_ZONES",
    "GeneratedEvent",
    "Location",
    "LocationKind",
    "OperationalStatus",
    "Route",
    "RouteSegment",
    "Severity",
    "Vehicle",
    "VehicleIdentity",
    "Zone",
    "compose_lifecycle",
    "derive_seed",
    "format_callsign",
    "generate_event",
    "generate_event_with_location",
    "generate_segments",
    "parse_entity_id",
    "point_in_zone",
    "resolve_from_catalog",
    "resolve_location",
    "resolve_status",
    "scalar",
    "vehicle_identity",
    "zone_bounds",
    "zone_centroid",
]

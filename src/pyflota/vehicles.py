"""Synthesized fleet roster ("unidades").

Every vehicle attribute is a scalar draw on ``fleet_seed + index`` with a
per-attribute offset, so :func:`generate_vehicle` for one ID agrees with
the same vehicle inside :func:`generate_fleet`.
"""

from __future__ import annotations

import math

from pyflota._constants import (
    VEHICLE_OFFSET_ASSIGNEE,
    VEHICLE_OFFSET_HEADING,
    VEHICLE_OFFSET_LAST_REPORT,
    VEHICLE_OFFSET_LAT,
    VEHICLE_OFFSET_LNG,
    VEHICLE_OFFSET_STATE,
    VEHICLE_OFFSET_TAG,
)
from pyflota.catalogs import resolve_from_catalog
from pyflota.config import DEFAULT_CONFIG, FlotaConfig
from pyflota.geo import jitter
from pyflota.identity import vehicle_identity
from pyflota.models.vehicle import Vehicle, VehicleState
from pyflota.seeding import scalar, scalar_index

_VEHICLE_STATES: tuple[VehicleState, ...] = tuple(VehicleState)
_ROSTER_OFFSET_SPAN_DEG = 0.1


def last_report_minutes(draw: float) -> int:
    """Map a ``[0, 1)`` draw to a last-report age.

    40% land in 0-30 minutes, 30% in 31-60 and 30% beyond 60.
    """
    if draw < 0.4:
        return math.floor(draw * 75)
    if draw < 0.7:
        return 31 + math.floor((draw - 0.4) * 100)
    return 61 + math.floor((draw - 0.7) * 500)


def generate_vehicle(vehicle_id: str, *, config: FlotaConfig = DEFAULT_CONFIG) -> Vehicle:
    """Synthesize vehicle ``"unidad-<n>"``; other IDs resolve as index 0."""
    identity = vehicle_identity(vehicle_id)
    seed = config.fleet_seed + identity.numeric_index
    catalogs = config.catalogs

    return Vehicle(
        id=f"unidad-{identity.numeric_index}",
        identity=identity,
        state=_VEHICLE_STATES[scalar_index(len(_VEHICLE_STATES), seed, VEHICLE_OFFSET_STATE)],
        position=jitter(
            config.base_position,
            scalar(seed, VEHICLE_OFFSET_LAT),
            scalar(seed, VEHICLE_OFFSET_LNG),
            _ROSTER_OFFSET_SPAN_DEG,
        ),
        tag=resolve_from_catalog(catalogs.tags, seed, VEHICLE_OFFSET_TAG),
        assignee_email=resolve_from_catalog(catalogs.assignees, seed, VEHICLE_OFFSET_ASSIGNEE),
        heading=scalar_index(360, seed, VEHICLE_OFFSET_HEADING),
        last_report_minutes=last_report_minutes(scalar(seed, VEHICLE_OFFSET_LAST_REPORT)),
    )


def generate_fleet(*, config: FlotaConfig = DEFAULT_CONFIG) -> list[Vehicle]:
    """Return ``config.fleet_size`` vehicles sorted by display name."""
    vehicles = [generate_vehicle(f"unidad-{index}", config=config) for index in range(config.fleet_size)]
    return sorted(vehicles, key=lambda vehicle: vehicle.display_name)


def vehicle_position(vehicle_id: str, *, config: FlotaConfig = DEFAULT_CONFIG) -> tuple[float, float] | None:
    """Current position of *vehicle_id*, or ``None`` if it is not in the roster."""
    identity = vehicle_identity(vehicle_id)
    if vehicle_id.strip() != f"unidad-{identity.numeric_index}" or identity.numeric_index >= config.fleet_size:
        return None
    return generate_vehicle(vehicle_id, config=config).position

"""Vehicle callsigns.

Callsigns are a fixed character-offset encoding of the vehicle index,
not a seeded draw, so operators can map ``unidad-4`` to ``EHL04`` in their
heads.  Letters repeat every 26 indices and the numeric suffix only
disambiguates while it is unique, so callsigns are not guaranteed
collision-free past index 99.  Changing the scheme would change every
callsign already shown to operators.
"""

from __future__ import annotations

from pyflota.ids import parse_entity_id
from pyflota.models.entity import EntityKind
from pyflota.models.vehicle import VehicleIdentity

_LETTER_OFFSETS = (0, 3, 7)


def format_callsign(numeric_index: int) -> str:
    """Return the callsign for *numeric_index* (``0 -> "ADH00"``)."""
    if numeric_index < 0:
        raise ValueError(f"vehicle index must be non-negative, got {numeric_index}")
    letters = "".join(chr(65 + (numeric_index + shift) % 26) for shift in _LETTER_OFFSETS)
    return f"{letters}{numeric_index:02d}"


def vehicle_identity(vehicle_id: str) -> VehicleIdentity:
    """Return the identity for ``"unidad-<n>"``; other IDs map to index 0."""
    parsed = parse_entity_id(vehicle_id)
    index = parsed.index if parsed.kind == EntityKind.VEHICLE else 0
    return VehicleIdentity(numeric_index=index, callsign=format_callsign(index))

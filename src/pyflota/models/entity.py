"""Parsed entity identifier model."""

from __future__ import annotations

from pydantic import Field

from pyflota.models._base import FlotaBaseModel, FlotaEnum


class EntityKind(FlotaEnum):
    EVENT = "event"
    VEHICLE = "vehicle"
    UNKNOWN = "unknown"


class ParsedEntityId(FlotaBaseModel):
    """An entity ID broken into its parts."""

    raw: str
    """The ID exactly as supplied."""
    kind: EntityKind
    index: int = Field(default=0, ge=0)
    """Trailing numeric index; ``0`` for unrecognised IDs."""
    date_seed: int | None = None
    """Date fragment of ``"<date>-event-<n>"`` IDs as an integer."""
    is_valid: bool = True

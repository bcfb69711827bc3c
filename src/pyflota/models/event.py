"""Generated event model.

Field values are pure functions of the event ID (and, for the creation
time of day, of the reference date); see :mod:`pyflota.events`.
"""

from __future__ import annotations

from datetime import datetime

from pyflota.models._base import FlotaBaseModel, FlotaEnum, Position

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class Severity(FlotaEnum):
    """Event severity, highest first."""

    ALTA = "Alta"
    MEDIA = "Media"
    BAJA = "Baja"
    INFORMATIVA = "Informativa"

    @property
    def rank(self) -> int:
        """Sort key; ``0`` is the most severe."""
        return list(Severity).index(self)


class OperationalStatus(FlotaEnum):
    """User-facing event status.

    Produced only by :func:`pyflota.status.resolve_status`.
    """

    ABIERTO = "abierto"
    EN_PROGRESO = "en_progreso"
    CERRADO = "cerrado"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[OperationalStatus, str] = {
    OperationalStatus.ABIERTO: "Abierto",
    OperationalStatus.EN_PROGRESO: "En progreso",
    OperationalStatus.CERRADO: "Cerrado",
}


# ------------------------------------------------------------------
# Models
# ------------------------------------------------------------------


class EventTemplate(FlotaBaseModel):
    """Catalog entry pairing an event name with its fixed severity."""

    name: str
    severity: Severity


class GeneratedEvent(FlotaBaseModel):
    """A synthesized fleet event."""

    id: str
    template_name: str
    """Event name (e.g. ``"Exceso de velocidad"``)."""
    severity: Severity
    creation_timestamp: datetime
    """Reference date with a seeded hour/minute/second."""
    tag: str
    """Customer / site tag (e.g. ``"OXXO"``)."""
    assignee_email: str
    instructions: str
    """Operator handling instructions for the template."""
    position: Position
    """Nominal marker position near the base coordinate."""

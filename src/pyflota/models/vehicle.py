"""Vehicle identity and roster models."""

from __future__ import annotations

from pydantic import Field

from pyflota._constants import REPORT_RECENT_MAX_MINUTES, REPORT_WARNING_MAX_MINUTES
from pyflota.models._base import FlotaBaseModel, FlotaEnum, Position


class VehicleState(FlotaEnum):
    ACTIVO = "Activo"
    INACTIVO = "Inactivo"
    EN_RUTA = "En ruta"
    DETENIDO = "Detenido"


class ReportFreshness(FlotaEnum):
    """Age band of a vehicle's last position report.

    - ``reciente``: 0-30 minutes
    - ``advertencia``: 31-60 minutes
    - ``critico``: over 60 minutes
    """

    RECIENTE = "reciente"
    ADVERTENCIA = "advertencia"
    CRITICO = "critico"

    @classmethod
    def from_minutes(cls, minutes: int) -> ReportFreshness:
        if minutes <= REPORT_RECENT_MAX_MINUTES:
            return cls.RECIENTE
        if minutes <= REPORT_WARNING_MAX_MINUTES:
            return cls.ADVERTENCIA
        return cls.CRITICO


class VehicleIdentity(FlotaBaseModel):
    numeric_index: int = Field(ge=0)
    callsign: str
    """Three letters plus the zero-padded index (e.g. ``"ADH00"``)."""


class Vehicle(FlotaBaseModel):
    """A synthesized fleet vehicle ("unidad")."""

    id: str
    identity: VehicleIdentity
    state: VehicleState
    position: Position
    tag: str
    assignee_email: str
    heading: int = Field(ge=0, lt=360)
    """Direction the vehicle faces, in degrees."""
    last_report_minutes: int = Field(ge=0)

    @property
    def display_name(self) -> str:
        return f"Unidad {self.identity.callsign}"

    @property
    def report_freshness(self) -> ReportFreshness:
        return ReportFreshness.from_minutes(self.last_report_minutes)

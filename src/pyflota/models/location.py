"""Location models (geofence or street address)."""

from __future__ import annotations

from pydantic import model_validator

from pyflota.models._base import FlotaBaseModel, FlotaEnum


class LocationKind(FlotaEnum):
    GEOFENCE = "geofence"
    ADDRESS = "address"


class Location(FlotaBaseModel):
    """A named geofence or a synthesized street address.

    ``label`` is what UI surfaces display.  Address parts are only set
    for :attr:`LocationKind.ADDRESS`.
    """

    kind: LocationKind
    label: str
    street: str | None = None
    number: int | None = None
    neighborhood: str | None = None

    @model_validator(mode="after")
    def _check_parts(self) -> Location:
        has_parts = self.street is not None and self.number is not None and self.neighborhood is not None
        if self.kind == LocationKind.ADDRESS and not has_parts:
            raise ValueError("address locations need street, number and neighborhood")
        return self

    @property
    def is_geofence(self) -> bool:
        return self.kind == LocationKind.GEOFENCE

    @property
    def short_label(self) -> str:
        """Street and number only, for narrow list rows."""
        if self.kind == LocationKind.ADDRESS:
            return f"{self.street} {self.number}..."
        return self.label

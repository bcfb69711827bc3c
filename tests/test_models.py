"""Tests for Pydantic record models with FlotaBaseModel + FlotaEnum."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from pyflota.models import (
    EventLifecycle,
    LifecyclePoint,
    Location,
    LocationKind,
    OperationalStatus,
    RouteAlignment,
    Severity,
    VehicleState,
)

_T0 = datetime(2025, 9, 4, 6, 0, tzinfo=UTC)

# ------------------------------------------------------------------
# FlotaEnum
# ------------------------------------------------------------------


class TestFlotaEnum:
    def test_case_insensitive_lookup(self) -> None:
        assert Severity("alta") == Severity.ALTA
        assert VehicleState("EN RUTA") == VehicleState.EN_RUTA
        assert OperationalStatus(" Cerrado ") == OperationalStatus.CERRADO

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError):
            Severity("urgente")

    def test_severity_rank(self) -> None:
        ranked = sorted(Severity, key=lambda severity: severity.rank, reverse=True)
        assert ranked[-1] == Severity.ALTA
        assert Severity.INFORMATIVA.rank == 3

    def test_str_value(self) -> None:
        assert str(OperationalStatus.EN_PROGRESO) == "en_progreso"


# ------------------------------------------------------------------
# FlotaBaseModel
# ------------------------------------------------------------------


def _point(minutes: int) -> LifecyclePoint:
    return LifecyclePoint(position=(20.6, -103.3), timestamp=_T0 + timedelta(minutes=minutes), name="Base")


class TestFlotaBaseModel:
    def test_records_are_frozen(self) -> None:
        point = _point(0)
        with pytest.raises(ValidationError):
            point.name = "Otro"  # type: ignore[misc]

    def test_position_lists_are_coerced(self) -> None:
        point = LifecyclePoint.model_validate({"position": [20, -103], "timestamp": _T0, "name": "Base"})
        assert point.position == (20.0, -103.0)

    def test_camel_case_input(self) -> None:
        alignment = RouteAlignment.model_validate({"startsOnRoute": True, "endsOnRoute": False, "startRouteIndex": 3})
        assert alignment.start_route_index == 3
        assert alignment.end_route_index is None

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RouteAlignment(starts_on_route=True, ends_on_route=True, colour="red")  # type: ignore[call-arg]


class TestEventLifecycle:
    def _alignment(self) -> RouteAlignment:
        return RouteAlignment(starts_on_route=False, ends_on_route=False)

    def test_duration(self) -> None:
        lifecycle = EventLifecycle(
            event_id="event-1",
            start_location=_point(0),
            end_location=_point(95),
            route_alignment=self._alignment(),
        )
        assert lifecycle.duration == timedelta(minutes=95)

    def test_end_must_follow_start(self) -> None:
        with pytest.raises(ValidationError):
            EventLifecycle(
                event_id="event-1",
                start_location=_point(10),
                end_location=_point(10),
                route_alignment=self._alignment(),
            )


def test_geofence_short_label() -> None:
    location = Location(kind=LocationKind.GEOFENCE, label="CEDIS Norte")
    assert location.is_geofence
    assert location.short_label == "CEDIS Norte"

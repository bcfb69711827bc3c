from __future__ import annotations

import pytest

from pyflota.config import FlotaConfig
from pyflota.models.vehicle import ReportFreshness, VehicleState
from pyflota.vehicles import generate_fleet, generate_vehicle, last_report_minutes, vehicle_position


def test_fleet_size_and_order() -> None:
    fleet = generate_fleet()
    assert len(fleet) == 15
    names = [vehicle.display_name for vehicle in fleet]
    assert names == sorted(names)
    assert len({vehicle.id for vehicle in fleet}) == 15


def test_generate_vehicle_agrees_with_fleet() -> None:
    by_id = {vehicle.id: vehicle for vehicle in generate_fleet()}
    for index in range(15):
        assert generate_vehicle(f"unidad-{index}") == by_id[f"unidad-{index}"]


def test_vehicle_fields() -> None:
    config = FlotaConfig()
    for vehicle in generate_fleet():
        assert vehicle.state in tuple(VehicleState)
        assert 0 <= vehicle.heading < 360
        assert vehicle.tag in config.catalogs.tags
        assert vehicle.assignee_email in config.catalogs.assignees
        assert vehicle.display_name == f"Unidad {vehicle.identity.callsign}"
        lat, lng = vehicle.position
        assert abs(lat - config.base_latitude) <= 0.05
        assert abs(lng - config.base_longitude) <= 0.05


def test_fleet_seed_changes_roster() -> None:
    assert generate_fleet(config=FlotaConfig(fleet_seed=1)) != generate_fleet()


def test_custom_fleet_size() -> None:
    assert len(generate_fleet(config=FlotaConfig(fleet_size=3))) == 3
    assert generate_fleet(config=FlotaConfig(fleet_size=0)) == []


def test_vehicle_position() -> None:
    assert vehicle_position("unidad-2") == generate_vehicle("unidad-2").position
    assert vehicle_position("unidad-99") is None
    assert vehicle_position("event-2") is None


@pytest.mark.parametrize(
    ("draw", "expected"),
    [
        (0.0, ReportFreshness.RECIENTE),
        (0.39, ReportFreshness.RECIENTE),
        (0.41, ReportFreshness.ADVERTENCIA),
        (0.69, ReportFreshness.ADVERTENCIA),
        (0.7, ReportFreshness.CRITICO),
        (0.99, ReportFreshness.CRITICO),
    ],
)
def test_last_report_minutes_bands(draw: float, expected: ReportFreshness) -> None:
    assert ReportFreshness.from_minutes(last_report_minutes(draw)) == expected


def test_report_freshness_edges() -> None:
    assert ReportFreshness.from_minutes(30) == ReportFreshness.RECIENTE
    assert ReportFreshness.from_minutes(31) == ReportFreshness.ADVERTENCIA
    assert ReportFreshness.from_minutes(60) == ReportFreshness.ADVERTENCIA
    assert ReportFreshness.from_minutes(61) == ReportFreshness.CRITICO


def test_oversized_vehicle_id_falls_back_to_index_zero() -> None:
    vehicle = generate_vehicle("unidad-" + "9" * 400)
    assert vehicle == generate_vehicle("unidad-0")
    assert vehicle_position("unidad-" + "9" * 400) is None

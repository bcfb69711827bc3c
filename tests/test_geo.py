from __future__ import annotations

import pytest

from pyflota.geo import destination_point, haversine_m, jitter, midpoint, positions_close


def test_haversine_zero() -> None:
    assert haversine_m((20.6, -103.3), (20.6, -103.3)) == 0.0


def test_haversine_one_degree_latitude() -> None:
    assert haversine_m((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111_195, rel=1e-3)


def test_positions_close() -> None:
    assert positions_close((20.0, -103.0), (20.0001, -103.0), 50)
    assert not positions_close((20.0, -103.0), (20.01, -103.0), 50)


def test_midpoint_on_equator() -> None:
    lat, lng = midpoint((0.0, 0.0), (0.0, 10.0))
    assert lat == pytest.approx(0.0, abs=1e-9)
    assert lng == pytest.approx(5.0)


@pytest.mark.parametrize("bearing", [0, 45, 90, 180, 271.5])
def test_destination_point_distance(bearing: float) -> None:
    origin = (20.66, -103.35)
    assert haversine_m(origin, destination_point(origin, 5000, bearing)) == pytest.approx(5000, abs=1e-3)


def test_destination_point_bearings() -> None:
    north = destination_point((20.0, -103.0), 1000, 0)
    east = destination_point((20.0, -103.0), 1000, 90)
    assert north[1] == pytest.approx(-103.0)
    assert north[0] > 20.0
    assert east[1] > -103.0
    assert destination_point((20.0, -103.0), 0, 123) == pytest.approx((20.0, -103.0))


def test_jitter() -> None:
    assert jitter((20.0, -103.0), 0.5, 0.5, 0.1) == (20.0, -103.0)
    lat, lng = jitter((20.0, -103.0), 0.0, 1.0, 0.1)
    assert lat == pytest.approx(19.95)
    assert lng == pytest.approx(-102.95)

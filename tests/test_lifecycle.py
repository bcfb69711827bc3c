"""Tests for the route-alignment lifecycle composer."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta

import pytest

from pyflota.catalogs import resolve_location
from pyflota.events import creation_timestamp
from pyflota.geo import haversine_m
from pyflota.ids import entity_seed
from pyflota.lifecycle import compose_lifecycle, generate_event_with_location, start_route_index
from pyflota.routes import generate_route
from pyflota.status import resolve_status

_ROUTE_START = datetime(2025, 9, 4, 6, 0, tzinfo=UTC)
_ROUTE = [(20.60 + i * 0.001, -103.35 + i * 0.0005) for i in range(40)]
_EVENT_IDS = [f"event-{index}" for index in range(200)]


def _duration_minutes(event_id: str, route: list[tuple[float, float]]) -> float:
    lifecycle = compose_lifecycle(event_id, route, _ROUTE_START)
    return lifecycle.duration.total_seconds() / 60


# ------------------------------------------------------------------
# Non-empty route
# ------------------------------------------------------------------


class TestRouteAligned:
    def test_starts_on_route_within_window(self) -> None:
        window = math.floor(len(_ROUTE) * 0.7)
        for event_id in _EVENT_IDS:
            lifecycle = compose_lifecycle(event_id, _ROUTE, _ROUTE_START)
            alignment = lifecycle.route_alignment
            assert alignment.starts_on_route
            assert alignment.start_route_index is not None
            assert 0 <= alignment.start_route_index < window
            assert lifecycle.start_location.position == _ROUTE[alignment.start_route_index]
            expected_start = _ROUTE_START + timedelta(minutes=alignment.start_route_index * 2)
            assert lifecycle.start_location.timestamp == expected_start

    def test_end_after_start(self) -> None:
        for event_id in _EVENT_IDS:
            lifecycle = compose_lifecycle(event_id, _ROUTE, _ROUTE_START)
            assert lifecycle.end_location.timestamp > lifecycle.start_location.timestamp

    def test_on_route_end_index(self) -> None:
        for event_id in _EVENT_IDS:
            lifecycle = compose_lifecycle(event_id, _ROUTE, _ROUTE_START)
            alignment = lifecycle.route_alignment
            if alignment.ends_on_route:
                assert alignment.end_route_index is not None
                assert alignment.start_route_index is not None
                assert alignment.start_route_index < alignment.end_route_index < len(_ROUTE)
                assert lifecycle.end_location.position == _ROUTE[alignment.end_route_index]
            else:
                assert alignment.end_route_index is None

    def test_every_branch_occurs(self) -> None:
        on_route = multi_day = near = 0
        for event_id in _EVENT_IDS:
            lifecycle = compose_lifecycle(event_id, _ROUTE, _ROUTE_START)
            minutes = lifecycle.duration.total_seconds() / 60
            if lifecycle.route_alignment.ends_on_route:
                on_route += 1
            elif minutes >= 8 * 60:
                multi_day += 1
            else:
                near += 1
        assert on_route > 0
        assert multi_day > 0
        assert near > 0

    def test_multi_day_ends_kilometres_away(self) -> None:
        for event_id in _EVENT_IDS:
            lifecycle = compose_lifecycle(event_id, _ROUTE, _ROUTE_START)
            if lifecycle.route_alignment.ends_on_route:
                continue
            minutes = lifecycle.duration.total_seconds() / 60
            distance = haversine_m(lifecycle.start_location.position, lifecycle.end_location.position)
            if minutes >= 8 * 60:
                assert minutes <= 48 * 60
                assert 2000 - 1e-3 <= distance <= 8000 + 1e-3
            else:
                assert 30 <= minutes <= 240
                assert distance < 9000

    def test_short_route_clamps_end_index(self) -> None:
        route = _ROUTE[:5]
        for event_id in _EVENT_IDS:
            alignment = compose_lifecycle(event_id, route, _ROUTE_START).route_alignment
            if alignment.ends_on_route:
                assert alignment.end_route_index == len(route) - 1

    def test_single_point_route(self) -> None:
        lifecycle = compose_lifecycle("event-1", [_ROUTE[0]], _ROUTE_START)
        assert lifecycle.route_alignment.start_route_index == 0
        assert lifecycle.start_location.timestamp == _ROUTE_START

    def test_accepts_route_model(self) -> None:
        route = generate_route(2)
        assert compose_lifecycle("event-4", route, _ROUTE_START) == compose_lifecycle(
            "event-4", route.points, _ROUTE_START
        )


# ------------------------------------------------------------------
# Empty route
# ------------------------------------------------------------------


class TestFreeFloating:
    def test_empty_route_starts_at_creation_time(self) -> None:
        for event_id in _EVENT_IDS[:50]:
            lifecycle = compose_lifecycle(event_id, [], _ROUTE_START)
            assert lifecycle.start_location.timestamp == creation_timestamp(event_id, _ROUTE_START)
            alignment = lifecycle.route_alignment
            assert not alignment.starts_on_route
            assert not alignment.ends_on_route
            assert alignment.start_route_index is None
            assert 10 <= _duration_minutes(event_id, []) <= 360

    def test_reference_date_overrides_route_start_day(self) -> None:
        lifecycle = compose_lifecycle("event-3", [], _ROUTE_START, date(2025, 8, 1))
        assert lifecycle.start_location.timestamp.date() == date(2025, 8, 1)

    def test_positions_near_base(self) -> None:
        lifecycle = compose_lifecycle("event-8", [], _ROUTE_START)
        for lat, lng in (lifecycle.start_location.position, lifecycle.end_location.position):
            assert abs(lat - 20.659699) <= 0.06
            assert abs(lng - -103.349609) <= 0.06


# ------------------------------------------------------------------
# Shared properties
# ------------------------------------------------------------------


@pytest.mark.parametrize("route", [_ROUTE, []])
def test_compose_is_deterministic(route: list[tuple[float, float]]) -> None:
    for event_id in _EVENT_IDS[:30]:
        assert compose_lifecycle(event_id, route, _ROUTE_START) == compose_lifecycle(event_id, route, _ROUTE_START)


def test_location_names() -> None:
    for event_id in _EVENT_IDS[:30]:
        seed = entity_seed(event_id)
        lifecycle = compose_lifecycle(event_id, _ROUTE, _ROUTE_START)
        assert lifecycle.start_location.name == resolve_location(seed).label
        assert lifecycle.end_location.name == resolve_location(seed + 1000).label


def test_malformed_id_composes_as_seed_zero() -> None:
    assert compose_lifecycle("bad", _ROUTE, _ROUTE_START).route_alignment == compose_lifecycle(
        "also bad", _ROUTE, _ROUTE_START
    ).route_alignment


def test_start_route_index_window() -> None:
    assert start_route_index(123, 1) == 0
    for seed in range(100):
        assert 0 <= start_route_index(seed, 10) < 7


def test_camel_case_dump() -> None:
    dumped = compose_lifecycle("event-1", _ROUTE, _ROUTE_START).model_dump(by_alias=True, mode="json")
    assert set(dumped) == {"eventId", "startLocation", "endLocation", "routeAlignment"}
    assert {"startsOnRoute", "endsOnRoute", "startRouteIndex", "endRouteIndex"} == set(dumped["routeAlignment"])


def test_event_with_location() -> None:
    record = generate_event_with_location("event-6", _ROUTE, _ROUTE_START)
    assert record.event.id == "event-6"
    assert record.lifecycle.event_id == "event-6"
    assert record.status == resolve_status("event-6")
    assert record.event.creation_timestamp.date() == _ROUTE_START.date()


def test_oversized_id_composes_as_seed_zero() -> None:
    raw = "event-" + "9" * 400
    assert compose_lifecycle(raw, [], _ROUTE_START).route_alignment == compose_lifecycle(
        "bad", [], _ROUTE_START
    ).route_alignment
    assert compose_lifecycle(raw, _ROUTE, _ROUTE_START).end_location == compose_lifecycle(
        "bad", _ROUTE, _ROUTE_START
    ).end_location

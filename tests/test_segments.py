"""Tests for the stop and travel timeline of a route."""

from __future__ import annotations

from pyflota.models.route import SegmentKind
from pyflota.routes import generate_route
from pyflota.segments import DAY_SCHEDULE, generate_segments

_ROUTE = [(20.60 + i * 0.001, -103.35 + i * 0.0005) for i in range(40)]


def test_alternating_stops_and_travel() -> None:
    segments = generate_segments(_ROUTE)
    assert len(segments) == len(DAY_SCHEDULE) == 7
    kinds = [segment.kind for segment in segments]
    assert kinds == [SegmentKind.STOP, SegmentKind.TRAVEL] * 3 + [SegmentKind.STOP]
    assert [segment.index for segment in segments] == list(range(7))


def test_segment_names() -> None:
    names = [segment.name for segment in generate_segments(_ROUTE)]
    assert names == ["Parada 1", "Traslado", "Parada 2", "Traslado", "Parada 3", "Traslado", "Parada 4"]


def test_stops_pin_to_route_points() -> None:
    stops = [segment for segment in generate_segments(_ROUTE) if segment.kind == SegmentKind.STOP]
    assert stops[0].coordinates == (_ROUTE[0],)
    assert stops[-1].coordinates == (_ROUTE[-1],)
    for stop in stops:
        assert len(stop.coordinates) == 1
        assert stop.coordinates[0] in _ROUTE
        assert stop.location


def test_travel_legs_cover_route() -> None:
    legs = [segment for segment in generate_segments(_ROUTE) if segment.kind == SegmentKind.TRAVEL]
    assert legs[0].coordinates[0] == _ROUTE[0]
    assert legs[-1].coordinates[-1] == _ROUTE[-1]
    for previous, current in zip(legs, legs[1:]):
        assert previous.coordinates[-1] == current.coordinates[0]
    assert all(leg.distance.endswith("Km") for leg in legs)
    assert all(leg.location is None for leg in legs)


def test_time_ranges_follow_schedule() -> None:
    segments = generate_segments(_ROUTE)
    assert segments[0].time_range == "08:00:00 - 10:15:00"
    assert segments[-1].time_range == "13:38:00 - 17:00:00"
    for previous, current in zip(segments, segments[1:]):
        assert previous.time_range.split(" - ")[1] == current.time_range.split(" - ")[0]


def test_empty_route() -> None:
    assert generate_segments([]) == []


def test_single_point_route() -> None:
    segments = generate_segments([(20.66, -103.35)])
    assert len(segments) == 7
    assert all(segment.coordinates == ((20.66, -103.35),) for segment in segments)


def test_accepts_route_model() -> None:
    route = generate_route(3)
    assert generate_segments(route) == generate_segments(route.points)


def test_camel_case_dump() -> None:
    dumped = generate_segments(_ROUTE)[1].model_dump(by_alias=True, mode="json")
    assert {"timeRange", "kind", "coordinates", "highlighted"} <= dumped.keys()
    assert dumped["kind"] == "travel"

from __future__ import annotations

import pytest

from pyflota._constants import MAX_ID_COMPONENT
from pyflota.ids import entity_seed, parse_entity_id
from pyflota.models.entity import EntityKind
from pyflota.seeding import derive_seed


def test_plain_event_id() -> None:
    parsed = parse_entity_id("event-7")
    assert parsed.kind == EntityKind.EVENT
    assert parsed.index == 7
    assert parsed.date_seed is None
    assert parsed.is_valid


def test_dated_event_id() -> None:
    parsed = parse_entity_id("20250904-event-1")
    assert parsed.kind == EntityKind.EVENT
    assert parsed.index == 1
    assert parsed.date_seed == 20250904


def test_vehicle_id() -> None:
    parsed = parse_entity_id("unidad-12")
    assert parsed.kind == EntityKind.VEHICLE
    assert parsed.index == 12
    assert parsed.date_seed is None


def test_surrounding_whitespace_is_ignored() -> None:
    parsed = parse_entity_id("  event-3 ")
    assert parsed.index == 3
    assert parsed.raw == "  event-3 "
    assert entity_seed("  event-3 ") == entity_seed("event-3")


@pytest.mark.parametrize("raw", ["", "event-", "event-x", "evento-1", "unidad", "abc-event-1", "event--1"])
def test_malformed_ids_fall_back_to_index_zero(raw: str) -> None:
    parsed = parse_entity_id(raw)
    assert parsed.kind == EntityKind.UNKNOWN
    assert parsed.index == 0
    assert not parsed.is_valid


def test_entity_seed_uses_hash_for_known_ids() -> None:
    assert entity_seed("event-5") == derive_seed("event-5")
    assert entity_seed("unidad-5") == derive_seed("unidad-5")


def test_entity_seed_is_zero_for_malformed_ids() -> None:
    assert entity_seed("not-an-event") == 0
    assert entity_seed("") == 0


def test_surrounding_whitespace_does_not_change_seed() -> None:
    assert entity_seed("  event-3 ") == entity_seed("event-3")
    assert entity_seed("\tunidad-2") == entity_seed("unidad-2")


@pytest.mark.parametrize(
    "raw",
    [
        "event-" + "9" * 400,
        "9" * 400 + "-event-1",
        "unidad-" + "9" * 400,
        f"event-{MAX_ID_COMPONENT + 1}",
        f"{MAX_ID_COMPONENT + 1}-event-1",
        "event-" + "1" + "0" * 10,
    ],
)
def test_out_of_range_numeric_parts_are_malformed(raw: str) -> None:
    parsed = parse_entity_id(raw)
    assert parsed.kind == EntityKind.UNKNOWN
    assert parsed.index == 0
    assert not parsed.is_valid
    assert entity_seed(raw) == 0


def test_largest_index_is_accepted() -> None:
    parsed = parse_entity_id(f"unidad-{MAX_ID_COMPONENT}")
    assert parsed.kind == EntityKind.VEHICLE
    assert parsed.index == MAX_ID_COMPONENT


def test_leading_zeros_do_not_count_toward_the_bound() -> None:
    parsed = parse_entity_id("event-" + "0" * 5000 + "12")
    assert parsed.is_valid
    assert parsed.index == 12

from __future__ import annotations

from collections import Counter

import pytest

from pyflota.models.event import OperationalStatus
from pyflota.status import is_open, resolve_status, status_from_draw


@pytest.mark.parametrize(
    ("draw", "expected"),
    [
        (0.0, OperationalStatus.ABIERTO),
        (0.39, OperationalStatus.ABIERTO),
        (0.40, OperationalStatus.EN_PROGRESO),
        (0.69, OperationalStatus.EN_PROGRESO),
        (0.70, OperationalStatus.CERRADO),
        (0.999, OperationalStatus.CERRADO),
    ],
)
def test_status_from_draw_cuts(draw: float, expected: OperationalStatus) -> None:
    assert status_from_draw(draw) == expected


def test_resolve_status_is_deterministic() -> None:
    for index in range(200):
        event_id = f"event-{index}"
        assert resolve_status(event_id) == resolve_status(event_id)


def test_resolve_status_distribution() -> None:
    counts = Counter(resolve_status(f"event-{index}") for index in range(1000))
    total = sum(counts.values())
    assert abs(counts[OperationalStatus.ABIERTO] / total - 0.40) < 0.05
    assert abs(counts[OperationalStatus.EN_PROGRESO] / total - 0.30) < 0.05
    assert abs(counts[OperationalStatus.CERRADO] / total - 0.30) < 0.05


def test_malformed_id_resolves_as_seed_zero() -> None:
    assert resolve_status("garbage") == OperationalStatus.ABIERTO


def test_is_open() -> None:
    assert is_open(OperationalStatus.ABIERTO)
    assert is_open(OperationalStatus.EN_PROGRESO)
    assert not is_open(OperationalStatus.CERRADO)


def test_status_labels() -> None:
    assert OperationalStatus.EN_PROGRESO.label == "En progreso"
    assert OperationalStatus("ABIERTO") == OperationalStatus.ABIERTO


def test_padded_id_resolves_like_trimmed_id() -> None:
    for index in range(50):
        assert resolve_status(f" event-{index}\n") == resolve_status(f"event-{index}")

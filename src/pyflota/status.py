"""Operational status resolver.

This is the single source of truth for an event's status.  Card badges,
detail headers, map marker styles and the filter store's "estado"
predicate all call :func:`resolve_status`; re-deriving the 40/30/30 split
locally would let surfaces disagree.
"""

from __future__ import annotations

from pyflota._constants import STATUS_IN_PROGRESS_CUT, STATUS_OPEN_CUT, STATUS_SEED_MULTIPLIER
from pyflota.ids import entity_seed
from pyflota.models.event import OperationalStatus
from pyflota.seeding import scalar


def status_from_draw(draw: float) -> OperationalStatus:
    """Map a ``[0, 1)`` draw onto the 40/30/30 status split."""
    if draw < STATUS_OPEN_CUT:
        return OperationalStatus.ABIERTO
    if draw < STATUS_IN_PROGRESS_CUT:
        return OperationalStatus.EN_PROGRESO
    return OperationalStatus.CERRADO


def resolve_status(event_id: str) -> OperationalStatus:
    """Return the operational status of *event_id*.

    Depends only on the ID, never on time.
    """
    return status_from_draw(scalar(entity_seed(event_id) * STATUS_SEED_MULTIPLIER))


def is_open(status: OperationalStatus) -> bool:
    """Whether *status* counts as open (abierto or en_progreso)."""
    return status != OperationalStatus.CERRADO

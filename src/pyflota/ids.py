"""Entity-ID parsing.

Recognised formats:

* ``"event-<n>"``
* ``"<date>-event-<n>"`` (e.g. ``"20250904-event-1"``)
* ``"unidad-<n>"``

Surrounding whitespace is ignored.  Anything else, including numeric
parts above :data:`~pyflota._constants.MAX_ID_COMPONENT`, parses as
:attr:`EntityKind.UNKNOWN` with index ``0``.  Parsing never raises.
"""

from __future__ import annotations

import logging
import re

from pyflota._constants import MAX_ID_COMPONENT
from pyflota.models.entity import EntityKind, ParsedEntityId
from pyflota.seeding import derive_seed

_logger = logging.getLogger(__name__)

_EVENT_RE = re.compile(r"^(?:(?P<date>\d+)-)?event-(?P<index>\d+)$")
_VEHICLE_RE = re.compile(r"^unidad-(?P<index>\d+)$")
_MAX_COMPONENT_DIGITS = len(str(MAX_ID_COMPONENT))


def _bounded_int(digits: str | None) -> int | None:
    """Return *digits* as an int, or ``None`` when absent or out of range."""
    if digits is None:
        return None
    significant = digits.lstrip("0")
    if len(significant) > _MAX_COMPONENT_DIGITS:
        return None
    value = int(significant or "0")
    return value if value <= MAX_ID_COMPONENT else None


def _malformed(entity_id: str, reason: str) -> ParsedEntityId:
    _logger.debug("Unrecognised entity id %r (%s); falling back to index 0", entity_id, reason)
    return ParsedEntityId(raw=entity_id, kind=EntityKind.UNKNOWN, index=0, is_valid=False)


def parse_entity_id(entity_id: str) -> ParsedEntityId:
    """Parse *entity_id* into a :class:`ParsedEntityId`."""
    text = entity_id.strip()

    match = _EVENT_RE.match(text)
    if match is not None:
        index = _bounded_int(match.group("index"))
        date = match.group("date")
        date_seed = _bounded_int(date)
        if index is None or (date is not None and date_seed is None):
            return _malformed(entity_id, "numeric part out of range")
        return ParsedEntityId(
            raw=entity_id,
            kind=EntityKind.EVENT,
            index=index,
            date_seed=date_seed,
            is_valid=True,
        )

    match = _VEHICLE_RE.match(text)
    if match is not None:
        index = _bounded_int(match.group("index"))
        if index is None:
            return _malformed(entity_id, "numeric part out of range")
        return ParsedEntityId(raw=entity_id, kind=EntityKind.VEHICLE, index=index, is_valid=True)

    return _malformed(entity_id, "no matching format")


def entity_seed(entity_id: str) -> int:
    """Primary seed for *entity_id*: the hash of its trimmed form when recognised, else ``0``.

    Trimming matches :func:`parse_entity_id`, so ``" event-3"`` and
    ``"event-3"`` are the same entity everywhere.
    """
    parsed = parse_entity_id(entity_id)
    if not parsed.is_valid:
        return 0
    return derive_seed(parsed.raw.strip())

"""Synthesized fleet events.

:func:`generate_event` is a pure function of the event ID and the
reference date.  Attribute draws use the ID's primary seed; the
creation time of day is drawn from the date fragment of
``"<date>-event-<n>"`` IDs (or the index for plain ``"event-<n>"``) so
that every event of a historical day shares one time-of-day sequence.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from pyflota._constants import (
    EVENT_OFFSET_SPAN_DEG,
    OFFSET_ASSIGNEE,
    OFFSET_EVENT_LAT,
    OFFSET_EVENT_LNG,
    OFFSET_TAG,
    OFFSET_TEMPLATE,
)
from pyflota.catalogs import resolve_from_catalog
from pyflota.config import DEFAULT_CONFIG, FlotaConfig
from pyflota.geo import jitter
from pyflota.ids import entity_seed, parse_entity_id
from pyflota.models.event import GeneratedEvent
from pyflota.seeding import random_int, scalar, scalar_index

_logger = logging.getLogger(__name__)

# Time-of-day draws use offsets ``index * 100 + 1..3``.
_TIME_OFFSET_STRIDE = 100


def as_datetime(value: date | datetime) -> datetime:
    """Promote a bare :class:`date` to midnight; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def creation_timestamp(event_id: str, reference_date: date | datetime) -> datetime:
    """Return the seeded creation time of *event_id* on *reference_date*."""
    parsed = parse_entity_id(event_id)
    time_seed = parsed.date_seed if parsed.date_seed is not None else parsed.index
    base_offset = parsed.index * _TIME_OFFSET_STRIDE
    hour = random_int(time_seed, 0, 23, base_offset + 1)
    minute = random_int(time_seed, 0, 59, base_offset + 2)
    second = random_int(time_seed, 0, 59, base_offset + 3)
    return as_datetime(reference_date).replace(hour=hour, minute=minute, second=second, microsecond=0)


def generate_event(
    event_id: str,
    reference_date: date | datetime,
    *,
    config: FlotaConfig = DEFAULT_CONFIG,
) -> GeneratedEvent:
    """Synthesize the event identified by *event_id*.

    Parameters
    ----------
    event_id : str
        ``"event-<n>"`` or ``"<date>-event-<n>"``.  Anything else is
        generated as if it were seed ``0``.
    reference_date : date or datetime
        Day the event is placed on.  Only its date part (and timezone) is
        used.
    config : FlotaConfig
        Supplies the catalogs and base coordinate.

    Returns
    -------
    GeneratedEvent
        Field-for-field identical for identical arguments.
    """
    seed = entity_seed(event_id)
    catalogs = config.catalogs

    template_index = scalar_index(len(catalogs.event_templates), seed, OFFSET_TEMPLATE)
    template = catalogs.event_templates[template_index]
    position = jitter(
        config.base_position,
        scalar(seed, OFFSET_EVENT_LAT),
        scalar(seed, OFFSET_EVENT_LNG),
        EVENT_OFFSET_SPAN_DEG,
    )

    event = GeneratedEvent(
        id=event_id,
        template_name=template.name,
        severity=template.severity,
        creation_timestamp=creation_timestamp(event_id, reference_date),
        tag=resolve_from_catalog(catalogs.tags, seed, OFFSET_TAG),
        assignee_email=resolve_from_catalog(catalogs.assignees, seed, OFFSET_ASSIGNEE),
        instructions=catalogs.instructions_for(template_index),
        position=position,
    )
    _logger.debug("Generated event id=%s template=%s severity=%s", event_id, event.template_name, event.severity)
    return event

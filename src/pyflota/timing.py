"""Render-boundary time helpers.

Composed records never contain "now".  Views that show how long an open
event has been running pass the current time into these helpers at
render time.
"""

from __future__ import annotations

from datetime import datetime

from pyflota.models.event import OperationalStatus
from pyflota.models.lifecycle import EventLifecycle
from pyflota.status import is_open

_MINUTES_PER_HOUR = 60
_MINUTES_PER_DAY = 24 * _MINUTES_PER_HOUR
_MINUTES_PER_WEEK = 7 * _MINUTES_PER_DAY
_MINUTES_PER_MONTH = 30 * _MINUTES_PER_DAY


def elapsed_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes from *start* to *end*, never negative."""
    return max(0, int((end - start).total_seconds() // 60))


def effective_window(
    lifecycle: EventLifecycle,
    status: OperationalStatus,
    now: datetime,
) -> tuple[datetime, datetime]:
    """Start and end to display for an event.

    Closed events use the composed end; open ones run until *now*.
    """
    start = lifecycle.start_location.timestamp
    if is_open(status):
        return start, now
    return start, lifecycle.end_location.timestamp


def format_duration(minutes: int) -> str:
    """Format *minutes* as ``"1sem 2d 3h 5min"``; ``"0 min"`` when zero."""
    minutes = max(0, minutes)
    parts: list[str] = []
    weeks, rest = divmod(minutes, _MINUTES_PER_WEEK)
    days, rest = divmod(rest, _MINUTES_PER_DAY)
    hours, mins = divmod(rest, _MINUTES_PER_HOUR)
    for value, suffix in ((weeks, "sem"), (days, "d"), (hours, "h"), (mins, "min")):
        if value > 0:
            parts.append(f"{value}{suffix}")
    return " ".join(parts) if parts else "0 min"


def format_elapsed(minutes: int) -> str:
    """Format an open event's age, keeping the three most significant units.

    Months are 30 days.  Returns ``"0min"`` when zero.
    """
    minutes = max(0, minutes)
    months, rest = divmod(minutes, _MINUTES_PER_MONTH)
    weeks, rest = divmod(rest, _MINUTES_PER_WEEK)
    days, rest = divmod(rest, _MINUTES_PER_DAY)
    hours, mins = divmod(rest, _MINUTES_PER_HOUR)
    parts = [
        f"{value}{suffix}"
        for value, suffix in ((months, "m"), (weeks, "sem"), (days, "d"), (hours, "h"), (mins, "min"))
        if value > 0
    ]
    if not parts:
        return "0min"
    return " ".join(parts[:3])


def event_code(event_id: str) -> str:
    """Short display code: ``"20250904-event-7"`` -> ``"EVT-07"``."""
    tail = event_id.rsplit("-", 1)[-1]
    return f"EVT-{tail.zfill(2) if tail else '00'}"

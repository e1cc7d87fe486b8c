from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus, EventType
from ..core.exceptions import MalformedEventError
from .model import AttendanceEvent, DailySummary


class _DayAccumulator:
    __slots__ = ("check_in", "check_out", "status")

    def __init__(self) -> None:
        self.check_in: Optional[time] = None
        self.check_out: Optional[time] = None
        self.status = AttendanceStatus.ON_TIME

    def fold(self, event: AttendanceEvent, at: time) -> None:
        if event.type == EventType.CHECK_IN:
            if self.check_in is None or at < self.check_in:
                self.check_in = at
            # Late is sticky for the whole day.
            if event.status == AttendanceStatus.LATE:
                self.status = AttendanceStatus.LATE
        elif event.type == EventType.CHECK_OUT:
            if self.check_out is None or at > self.check_out:
                self.check_out = at
        else:
            raise MalformedEventError(f"unknown event type {event.type!r}")

    def freeze(self, day: date) -> DailySummary:
        return DailySummary(date=day, check_in=self.check_in, check_out=self.check_out, status=self.status)


def _resolve(event) -> tuple[date, time]:
    if not isinstance(event, AttendanceEvent):
        raise MalformedEventError(f"not an attendance event: {event!r}")
    ts = event.timestamp
    if not isinstance(ts, datetime):
        raise MalformedEventError(f"event timestamp is not a datetime: {ts!r}")
    # Wall clock of the timestamp itself; the event source owns timezones.
    return ts.date(), ts.time()


def aggregate(events: Iterable[AttendanceEvent]) -> dict[date, DailySummary]:
    """Reduce a flat, unordered event stream to one summary per calendar day.

    Earliest check-in and latest check-out win; a single late check-in makes
    the whole day late. The fold is order-independent, so re-running it on
    any permutation of the same events gives the same mapping.

    Events are not filtered by employee, callers scope them beforehand.
    Raises MalformedEventError on the first unusable event; no partial
    result is returned.
    """
    days: dict[date, _DayAccumulator] = {}
    for event in events:
        day, at = _resolve(event)
        acc = days.get(day)
        if acc is None:
            acc = _DayAccumulator()
            days[day] = acc
        acc.fold(event, at)

    return {day: acc.freeze(day) for day, acc in days.items()}

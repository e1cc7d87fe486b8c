from __future__ import annotations

import json
import logging
import threading
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .model import AttendanceEvent

logger = logging.getLogger(__name__)


class InMemoryAttendanceEventRepository:
    """Append-only event store standing in for the kiosk/check-in backend."""

    def __init__(self, events: Optional[Iterable[AttendanceEvent]] = None):
        self._events: list[AttendanceEvent] = list(events or [])
        self._lock = threading.Lock()

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryAttendanceEventRepository":
        """Seed from a JSON list of raw event records.

        A malformed record fails the whole load (MalformedEventError).
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as fh:
            raw_events = json.load(fh)
        events = [AttendanceEvent.from_dict(raw) for raw in raw_events]
        logger.info("Loaded %d attendance events from %s", len(events), path)
        return cls(events)

    def add(self, event: AttendanceEvent) -> None:
        with self._lock:
            self._events.append(event)

    def list_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceEvent]:
        with self._lock:
            snapshot = list(self._events)
        return [
            e
            for e in snapshot
            if e.employee_id == employee_id and start <= e.timestamp.date() <= end
        ]

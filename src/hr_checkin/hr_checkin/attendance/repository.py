from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    def list_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceEvent]:
        """Events of one employee whose timestamp falls on a day in [start, end]."""

        raise NotImplementedError

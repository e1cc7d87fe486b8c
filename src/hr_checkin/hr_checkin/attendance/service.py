from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import format_hhmm
from ..common.validators import require_date_range, require_non_empty
from ..core.enums import AttendanceStatus
from .aggregator import aggregate
from .model import AttendanceStats, DailySummary
from .repository import AttendanceEventRepository
from .statistics import summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceHistory:
    summaries: list[DailySummary]
    stats: AttendanceStats


class AttendanceHistoryService:
    def __init__(self, events: AttendanceEventRepository):
        self._events = events

    def get_daily_summaries(self, employee_id: str, start: date, end: date) -> list[DailySummary]:
        employee_id = require_non_empty(employee_id, "employee_id")
        require_date_range(start, end)

        events = self._events.list_for_employee(employee_id, start, end)
        by_day = aggregate(events)
        logger.debug(
            "Aggregated %d events into %d days for employee=%s (%s..%s)",
            len(events), len(by_day), employee_id, start, end,
        )
        return [by_day[d] for d in sorted(by_day)]

    def get_history(self, employee_id: str, start: date, end: date) -> AttendanceHistory:
        summaries = self.get_daily_summaries(employee_id, start, end)
        return AttendanceHistory(summaries=summaries, stats=summarize(summaries))

    def get_history_ui(self, employee_id: str, start: date, end: date) -> list[dict]:
        return [self._to_ui(s) for s in self.get_daily_summaries(employee_id, start, end)]

    def _to_ui(self, s: DailySummary) -> dict:
        label = {
            AttendanceStatus.ON_TIME: "On time",
            AttendanceStatus.LATE: "Late",
        }.get(s.status, s.status.value)

        css = {
            AttendanceStatus.ON_TIME: "bg-success",
            AttendanceStatus.LATE: "bg-danger",
        }.get(s.status, "bg-secondary")

        return {
            "date": s.date.strftime("%Y-%m-%d"),
            "check_in": format_hhmm(s.check_in),
            "check_out": format_hhmm(s.check_out),
            "status": label,
            "css_class": css,
        }

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..attendance.service import AttendanceHistoryService
from ..attendance.statistics import summarize
from ..settings.store import SettingsStore
from .calculator.base import PenaltyCalculator
from .calculator.standard_calculator import StandardPenaltyCalculator
from .model import PenaltyReport

logger = logging.getLogger(__name__)


class PenaltyReportService:
    def __init__(
        self,
        history: AttendanceHistoryService,
        settings: SettingsStore,
        *,
        calculator: Optional[PenaltyCalculator] = None,
    ):
        self._history = history
        self._settings = settings
        self._calculator = calculator or StandardPenaltyCalculator()

    def build_penalty_report(self, *, employee_id: str, start: date, end: date) -> PenaltyReport:
        config = self._settings.get()
        summaries = self._history.get_daily_summaries(employee_id, start, end)

        late_by_threshold = {r.label: 0 for r in config.rules}
        days = []
        resolved = []
        total = 0

        for s in summaries:
            p = self._calculator.day_penalty(s, config)
            days.append(p)
            resolved.append(replace(s, status=p.status))
            total += p.deduction
            for label in p.charged:
                late_by_threshold[label] = late_by_threshold.get(label, 0) + 1

        stats = summarize(resolved)
        logger.info(
            "Penalty report employee=%s %s..%s: %d days, %d late, deduction=%s",
            employee_id, start, end, stats.total, stats.late, total,
        )
        return PenaltyReport(
            employee_id=employee_id,
            days=days,
            stats=stats,
            total_deduction=total,
            late_by_threshold=late_by_threshold,
        )

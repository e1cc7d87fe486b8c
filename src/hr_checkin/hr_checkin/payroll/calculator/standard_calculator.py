from __future__ import annotations

from .base import PenaltyCalculator
from ..model import DayPenalty
from ...attendance.model import DailySummary
from ...core.enums import AttendanceStatus
from ...lateness.engine import charged_rules, late_minutes, resolve_status
from ...lateness.model import AttendanceConfig


class StandardPenaltyCalculator(PenaltyCalculator):
    """Standard rule: only late days are charged, lateness measured from shift start."""

    def day_penalty(self, summary: DailySummary, config: AttendanceConfig) -> DayPenalty:
        status = resolve_status(summary, config)
        if status != AttendanceStatus.LATE:
            return DayPenalty(date=summary.date, status=status, late_minutes=0, deduction=0)

        # late_minutes() never goes below 0
        minutes = late_minutes(summary.check_in, config.shift_start)
        charged = charged_rules(minutes, config.rules, config.deduction_policy)
        return DayPenalty(
            date=summary.date,
            status=status,
            late_minutes=minutes,
            deduction=sum((r.amount for r in charged), 0),
            charged=tuple(r.label for r in charged),
        )

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance.model import AttendanceStats
from ..core.enums import AttendanceStatus
from ..lateness.model import Amount


@dataclass(frozen=True)
class DayPenalty:
    date: date
    status: AttendanceStatus
    late_minutes: int
    deduction: Amount
    charged: tuple[str, ...] = ()


@dataclass(frozen=True)
class PenaltyReport:
    employee_id: str
    days: list[DayPenalty]
    stats: AttendanceStats
    total_deduction: Amount
    late_by_threshold: dict[str, int]

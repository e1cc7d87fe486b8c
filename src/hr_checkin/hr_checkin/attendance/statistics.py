from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceStats, DailySummary


def summarize(summaries: Iterable[DailySummary]) -> AttendanceStats:
    """Count total/on-time/late days. Anything not LATE is on time."""
    total = 0
    late = 0
    for s in summaries:
        total += 1
        if s.status == AttendanceStatus.LATE:
            late += 1
    return AttendanceStats(total=total, on_time=total - late, late=late)

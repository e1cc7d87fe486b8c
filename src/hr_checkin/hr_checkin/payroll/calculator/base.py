from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import DailySummary
from ...lateness.model import AttendanceConfig
from ..model import DayPenalty


class PenaltyCalculator(ABC):
    """Calculator interface (Strategy Pattern for lateness penalties)."""

    @abstractmethod
    def day_penalty(self, summary: DailySummary, config: AttendanceConfig) -> DayPenalty:
        raise NotImplementedError

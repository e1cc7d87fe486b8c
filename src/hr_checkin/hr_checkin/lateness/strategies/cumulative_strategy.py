from __future__ import annotations

from typing import Sequence

from ..model import LatenessRule
from .base import DeductionStrategy, exceeded


class CumulativeStrategy(DeductionStrategy):
    """Every exceeded band is charged (penalty ladder)."""

    def charged_rules(self, late_minutes: int, rules: Sequence[LatenessRule]) -> list[LatenessRule]:
        return exceeded(late_minutes, rules)

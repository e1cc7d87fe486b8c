from __future__ import annotations

from typing import Sequence

from ..model import LatenessRule
from .base import DeductionStrategy, exceeded


class HighestBandStrategy(DeductionStrategy):
    """Only the exceeded band with the largest threshold is charged.

    On equal thresholds the rule stored first wins.
    """

    def charged_rules(self, late_minutes: int, rules: Sequence[LatenessRule]) -> list[LatenessRule]:
        best = None
        for r in exceeded(late_minutes, rules):
            if best is None or r.minutes > best.minutes:
                best = r
        return [best] if best is not None else []

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import Amount, LatenessRule


def exceeded(late_minutes: int, rules: Sequence[LatenessRule]) -> list[LatenessRule]:
    """Rules whose threshold is strictly exceeded, in stored order."""
    return [r for r in rules if late_minutes > r.minutes]


class DeductionStrategy(ABC):
    """Strategy Pattern: how matching lateness bands turn into one deduction."""

    @abstractmethod
    def charged_rules(self, late_minutes: int, rules: Sequence[LatenessRule]) -> list[LatenessRule]:
        raise NotImplementedError

    def deduct(self, late_minutes: int, rules: Sequence[LatenessRule]) -> Amount:
        return sum((r.amount for r in self.charged_rules(late_minutes, rules)), 0)

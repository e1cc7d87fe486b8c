from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DeductionPolicy
from ..core.exceptions import ValidationError
from .strategies.base import DeductionStrategy
from .strategies.cumulative_strategy import CumulativeStrategy
from .strategies.highest_band_strategy import HighestBandStrategy


@dataclass
class DeductionStrategyFactory:
    """Factory Pattern: choose the deduction strategy for a configured policy."""

    def for_policy(self, policy: DeductionPolicy) -> DeductionStrategy:
        if policy == DeductionPolicy.CUMULATIVE:
            return CumulativeStrategy()
        if policy == DeductionPolicy.HIGHEST_BAND:
            return HighestBandStrategy()
        raise ValidationError(f"unknown deduction policy {policy!r}")

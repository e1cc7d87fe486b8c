"""Lateness policy: deduction lookup, late classification, status resolution.

All functions are pure; configuration is passed in, never read from globals.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..attendance.model import DailySummary
from ..core.enums import AttendanceStatus, DeductionPolicy
from ..core.exceptions import ValidationError
from .factory import DeductionStrategyFactory
from .model import Amount, AttendanceConfig, LatenessRule

_factory = DeductionStrategyFactory()


def _offset(check_in: time, scheduled_start: time) -> timedelta:
    return datetime.combine(date.min, check_in) - datetime.combine(date.min, scheduled_start)


def deduction_for(
    late_minutes: int,
    rules: Sequence[LatenessRule],
    policy: DeductionPolicy = DeductionPolicy.CUMULATIVE,
) -> Amount:
    """Deduction for one day that is ``late_minutes`` late.

    A rule applies when ``late_minutes > rule.minutes``. Under the cumulative
    policy every applying rule is charged; under highest-band only the one
    with the largest threshold.
    """
    if isinstance(late_minutes, bool) or late_minutes < 0:
        raise ValidationError("late_minutes must be a non-negative integer")
    return _factory.for_policy(policy).deduct(late_minutes, rules)


def charged_rules(
    late_minutes: int,
    rules: Sequence[LatenessRule],
    policy: DeductionPolicy = DeductionPolicy.CUMULATIVE,
) -> list[LatenessRule]:
    return _factory.for_policy(policy).charged_rules(late_minutes, rules)


def is_late(check_in: time, scheduled_start: time, late_threshold: int) -> bool:
    return _offset(check_in, scheduled_start) > timedelta(minutes=late_threshold)


def late_minutes(check_in: Optional[time], scheduled_start: time) -> int:
    """Whole minutes past the scheduled start, never negative."""
    if check_in is None:
        return 0
    minutes = int(_offset(check_in, scheduled_start).total_seconds() // 60)
    return max(minutes, 0)


def resolve_status(summary: DailySummary, config: AttendanceConfig) -> AttendanceStatus:
    # A LATE carried by the check-in event wins over the threshold.
    if summary.status == AttendanceStatus.LATE:
        return AttendanceStatus.LATE
    if summary.check_in is None:
        return AttendanceStatus.ON_TIME
    if is_late(summary.check_in, config.shift_start, config.late_threshold):
        return AttendanceStatus.LATE
    return AttendanceStatus.ON_TIME

from __future__ import annotations

import json

from ..common.datetime_utils import parse_hhmm
from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES, DEFAULT_LATENESS_RULES, DEFAULT_SHIFT_START
from ..core.enums import DeductionPolicy
from ..core.exceptions import InvalidRuleError, ValidationError
from ..lateness.model import AttendanceConfig, LatenessRule
from ..lateness.rules import add_rule


def parse_rules(raw) -> tuple[LatenessRule, ...]:
    """Rules from a JSON string or a list of ``{"minutes", "amount"}`` mappings."""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise InvalidRuleError("LATENESS_RULES is not valid JSON") from e

    rules: tuple[LatenessRule, ...] = ()
    for item in raw or ():
        try:
            rule = LatenessRule(minutes=item["minutes"], amount=item["amount"])
        except (KeyError, TypeError) as e:
            raise InvalidRuleError(f"invalid lateness rule {item!r}") from e
        rules = add_rule(rules, rule)
    return rules


def load_attendance_config(settings) -> AttendanceConfig:
    """Build an AttendanceConfig from a settings module (see ``config/``)."""
    try:
        shift_start = parse_hhmm(str(getattr(settings, "SHIFT_START", DEFAULT_SHIFT_START)))
    except ValueError as e:
        raise ValidationError("SHIFT_START must be HH:MM") from e

    late_threshold = int(getattr(settings, "LATE_THRESHOLD_MINUTES", DEFAULT_LATE_THRESHOLD_MINUTES))
    if late_threshold < 0:
        raise ValidationError("LATE_THRESHOLD_MINUTES must not be negative")

    raw_policy = getattr(settings, "DEDUCTION_POLICY", DeductionPolicy.CUMULATIVE)
    try:
        policy = raw_policy if isinstance(raw_policy, DeductionPolicy) else DeductionPolicy(str(raw_policy).lower())
    except ValueError as e:
        raise ValidationError("DEDUCTION_POLICY must be 'cumulative' or 'highest_band'") from e

    return AttendanceConfig(
        shift_start=shift_start,
        late_threshold=late_threshold,
        rules=parse_rules(getattr(settings, "LATENESS_RULES", list(DEFAULT_LATENESS_RULES))),
        deduction_policy=policy,
    )

from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Sequence

from ..core.exceptions import InvalidRuleError
from .model import LatenessRule


def validate_rule(rule: LatenessRule) -> LatenessRule:
    if not isinstance(rule, LatenessRule):
        raise InvalidRuleError(f"not a lateness rule: {rule!r}")
    if isinstance(rule.minutes, bool) or not isinstance(rule.minutes, int) or rule.minutes < 0:
        raise InvalidRuleError("minutes must be a non-negative integer")
    if isinstance(rule.amount, bool) or not isinstance(rule.amount, (Real, Decimal)) or rule.amount < 0:
        raise InvalidRuleError("amount must be a non-negative number")
    return rule


def _check_index(rules: Sequence[LatenessRule], index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(rules):
        raise InvalidRuleError(f"no lateness rule at index {index!r}")
    return index


def add_rule(rules: Sequence[LatenessRule], rule: LatenessRule) -> tuple[LatenessRule, ...]:
    """Return a new rule set with ``rule`` appended. Duplicates are kept."""
    return (*rules, validate_rule(rule))


def remove_rule(rules: Sequence[LatenessRule], index: int) -> tuple[LatenessRule, ...]:
    """Return a new rule set without the rule at ``index``."""
    i = _check_index(rules, index)
    return (*rules[:i], *rules[i + 1:])


def replace_rule(rules: Sequence[LatenessRule], index: int, rule: LatenessRule) -> tuple[LatenessRule, ...]:
    i = _check_index(rules, index)
    return (*rules[:i], validate_rule(rule), *rules[i + 1:])

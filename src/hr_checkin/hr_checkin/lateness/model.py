from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from typing import Union

from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES
from ..core.enums import DeductionPolicy

Amount = Union[int, float, Decimal]


@dataclass(frozen=True)
class LatenessRule:
    """Một bậc phạt đi muộn: muộn quá ``minutes`` phút thì trừ ``amount``."""

    minutes: int
    amount: Amount

    @property
    def label(self) -> str:
        return f">{self.minutes}min"


@dataclass(frozen=True)
class AttendanceConfig:
    """Cấu hình chấm công (chỉ đọc). Muốn thay đổi thì tạo giá trị mới."""

    shift_start: time = time(8, 0)
    late_threshold: int = DEFAULT_LATE_THRESHOLD_MINUTES
    rules: tuple[LatenessRule, ...] = ()
    deduction_policy: DeductionPolicy = DeductionPolicy.CUMULATIVE

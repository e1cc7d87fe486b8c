from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    """Loại sự kiện chấm công do thiết bị/kiosk gửi lên."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"


class AttendanceStatus(str, Enum):
    """Trạng thái của một ngày công (hoặc của một lần check-in)."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"


class DeductionPolicy(str, Enum):
    """How several matching lateness bands combine into one deduction."""

    CUMULATIVE = "cumulative"
    HIGHEST_BAND = "highest_band"

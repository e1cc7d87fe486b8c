from __future__ import annotations

from datetime import datetime, time

import pytest

from src.hr_checkin.hr_checkin.attendance.model import AttendanceEvent
from src.hr_checkin.hr_checkin.core.enums import AttendanceStatus, EventType
from src.hr_checkin.hr_checkin.lateness.model import AttendanceConfig, LatenessRule


def make_event(ts: str, type_: EventType, status: AttendanceStatus | None = None, employee_id: str = "CR001"):
    return AttendanceEvent(
        employee_id=employee_id,
        timestamp=datetime.fromisoformat(ts),
        type=type_,
        status=status,
    )


def check_in(ts: str, status: AttendanceStatus | None = AttendanceStatus.ON_TIME, employee_id: str = "CR001"):
    return make_event(ts, EventType.CHECK_IN, status, employee_id)


def check_out(ts: str, employee_id: str = "CR001"):
    return make_event(ts, EventType.CHECK_OUT, None, employee_id)


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 3, 9, 0, 0)


@pytest.fixture
def ladder_rules():
    return (LatenessRule(minutes=10, amount=100), LatenessRule(minutes=30, amount=200))


@pytest.fixture
def attendance_config(ladder_rules):
    return AttendanceConfig(shift_start=time(8, 0), late_threshold=15, rules=ladder_rules)


@pytest.fixture
def scenario_events():
    return [
        check_in("2024-01-01T08:05:00", AttendanceStatus.ON_TIME),
        check_out("2024-01-01T17:30:00"),
        check_in("2024-01-02T09:10:00", AttendanceStatus.LATE),
        check_out("2024-01-02T17:00:00"),
    ]

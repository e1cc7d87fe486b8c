from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.hr_checkin.hr_checkin.attendance.model import AttendanceEvent
from src.hr_checkin.hr_checkin.core.enums import AttendanceStatus, EventType
from src.hr_checkin.hr_checkin.core.exceptions import MalformedEventError


def test_from_dict_accepts_event_source_record():
    event = AttendanceEvent.from_dict(
        {"employee_id": "CR002", "timestamp": "2024-01-02T09:10:00", "type": "check_in", "status": "Late"}
    )

    assert event == AttendanceEvent(
        employee_id="CR002",
        timestamp=datetime(2024, 1, 2, 9, 10),
        type=EventType.CHECK_IN,
        status=AttendanceStatus.LATE,
    )


@pytest.mark.parametrize(
    "raw_type, expected",
    [
        ("CheckIn", EventType.CHECK_IN),
        ("check_out", EventType.CHECK_OUT),
        ("CHECK_OUT", EventType.CHECK_OUT),
        (EventType.CHECK_IN, EventType.CHECK_IN),
    ],
)
def test_from_dict_type_spellings(raw_type, expected):
    event = AttendanceEvent.from_dict({"employeeId": "CR001", "timestamp": "2024-01-02T08:00:00", "type": raw_type})

    assert event.type == expected


@pytest.mark.parametrize(
    "raw_status, expected",
    [
        ("On Time", AttendanceStatus.ON_TIME),
        ("OnTime", AttendanceStatus.ON_TIME),
        ("LATE", AttendanceStatus.LATE),
        (None, None),
    ],
)
def test_from_dict_status_spellings(raw_status, expected):
    event = AttendanceEvent.from_dict(
        {"employee_id": "CR001", "timestamp": "2024-01-02T08:00:00", "type": "check_in", "status": raw_status}
    )

    assert event.status == expected


def test_from_dict_utc_suffix_is_kept_without_conversion():
    event = AttendanceEvent.from_dict({"employee_id": "CR001", "timestamp": "2024-01-02T01:05:00Z", "type": "check_in"})

    assert event.timestamp == datetime(2024, 1, 2, 1, 5, tzinfo=timezone.utc)
    assert event.timestamp.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "raw",
    [
        {"employee_id": "CR001", "timestamp": "yesterday", "type": "check_in"},
        {"employee_id": "CR001", "timestamp": None, "type": "check_in"},
        {"employee_id": "CR001", "timestamp": "2024-01-02T08:00:00", "type": "lunch"},
        {"employee_id": "  ", "timestamp": "2024-01-02T08:00:00", "type": "check_in"},
        {"employee_id": "CR002", "timestamp": "2024-01-02T09:10:00", "type": "check_in", "status": "Lates"},
        {"employee_id": "CR002", "timestamp": "2024-01-02T09:10:00", "type": "check_in", "status": "absent"},
        ["CR001", "2024-01-02T08:00:00", "check_in"],
        "CR001,2024-01-02T08:00:00,check_in",
    ],
)
def test_from_dict_rejects_malformed_records(raw):
    with pytest.raises(MalformedEventError):
        AttendanceEvent.from_dict(raw)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..core.enums import AttendanceStatus, EventType
from ..core.exceptions import MalformedEventError

_EVENT_TYPES = {
    "checkin": EventType.CHECK_IN,
    "checkout": EventType.CHECK_OUT,
}

_STATUSES = {
    "late": AttendanceStatus.LATE,
    "on_time": AttendanceStatus.ON_TIME,
    "ontime": AttendanceStatus.ON_TIME,
    "on time": AttendanceStatus.ON_TIME,
}


def _norm(value) -> str:
    return str(value).strip().lower().replace("-", "_")


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Một lần chấm công vào/ra.

    Sự kiện chỉ được thêm mới, không bao giờ bị sửa hay xoá.
    """

    employee_id: str
    timestamp: datetime
    type: EventType
    status: Optional[AttendanceStatus] = None

    @classmethod
    def from_dict(cls, raw: Mapping) -> "AttendanceEvent":
        """Build an event from a loosely-typed record of the event source.

        Accepts both snake_case and camelCase keys, ``check_in``/``CheckIn``
        style types and ``Late``/``On Time`` style statuses.
        """
        if not isinstance(raw, Mapping):
            raise MalformedEventError(f"event record is not a mapping: {raw!r}")

        employee_id = raw.get("employee_id", raw.get("employeeId"))
        if not employee_id or not str(employee_id).strip():
            raise MalformedEventError("event has no employee id")

        try:
            timestamp = parse_timestamp(raw.get("timestamp"))
        except (TypeError, ValueError) as e:
            raise MalformedEventError(f"invalid timestamp {raw.get('timestamp')!r}") from e

        raw_type = raw.get("type")
        if isinstance(raw_type, EventType):
            event_type = raw_type
        else:
            event_type = _EVENT_TYPES.get(_norm(raw_type).replace("_", ""))
            if event_type is None:
                raise MalformedEventError(f"unknown event type {raw_type!r}")

        raw_status = raw.get("status")
        status = None
        if isinstance(raw_status, AttendanceStatus):
            status = raw_status
        elif raw_status:
            status = _STATUSES.get(_norm(raw_status))
            if status is None:
                raise MalformedEventError(f"unknown status {raw_status!r}")

        return cls(
            employee_id=str(employee_id).strip(),
            timestamp=timestamp,
            type=event_type,
            status=status,
        )


@dataclass(frozen=True)
class DailySummary:
    """Read-model: tổng hợp chấm công của một nhân viên trong một ngày."""

    date: date
    check_in: Optional[time]
    check_out: Optional[time]
    status: AttendanceStatus = AttendanceStatus.ON_TIME


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    on_time: int
    late: int

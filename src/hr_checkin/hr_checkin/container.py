from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_repository import InMemoryAttendanceEventRepository
from .attendance.service import AttendanceHistoryService
from .lateness.model import AttendanceConfig
from .payroll.service import PenaltyReportService
from .settings.store import SettingsStore


@dataclass(frozen=True)
class Container:
    events_repo: InMemoryAttendanceEventRepository
    settings_store: SettingsStore

    history_service: AttendanceHistoryService
    penalty_report_service: PenaltyReportService


def build_container(
    *,
    config: AttendanceConfig,
    events_repo: Optional[InMemoryAttendanceEventRepository] = None,
) -> Container:
    events_repo = events_repo or InMemoryAttendanceEventRepository()
    settings_store = SettingsStore(config)

    history_service = AttendanceHistoryService(events_repo)
    penalty_report_service = PenaltyReportService(history_service, settings_store)

    return Container(
        events_repo=events_repo,
        settings_store=settings_store,
        history_service=history_service,
        penalty_report_service=penalty_report_service,
    )

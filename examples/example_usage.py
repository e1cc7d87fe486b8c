"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.hr_checkin.hr_checkin.attendance.memory_repository import InMemoryAttendanceEventRepository
from src.hr_checkin.hr_checkin.container import build_container
from src.hr_checkin.hr_checkin.settings.loader import load_attendance_config


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        config=load_attendance_config(settings),
        events_repo=InMemoryAttendanceEventRepository.from_json_file("data/seed_events.json"),
    )
    start, end = date(2024, 1, 1), date(2024, 1, 31)
    print(container.history_service.get_history_ui("CR001", start, end))
    print(container.penalty_report_service.build_penalty_report(employee_id="CR002", start=start, end=end))


if __name__ == "__main__":
    main()

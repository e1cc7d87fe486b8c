from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.memory_repository import InMemoryAttendanceEventRepository
from .container import build_container
from .lateness.controller import register as register_lateness
from .payroll.controller import register as register_payroll
from .settings.loader import load_attendance_config

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    config = load_attendance_config(settings)
    seed_path = getattr(settings, "EVENTS_SEED_PATH", None)
    events_repo = InMemoryAttendanceEventRepository.from_json_file(seed_path) if seed_path else None

    container = build_container(config=config, events_repo=events_repo)
    app.extensions["hr_checkin"] = container

    register_attendance(app, container)
    register_payroll(app, container)
    register_lateness(app, container)

    logger.info(
        "hr-checkin started (settings=%s, shift_start=%s, threshold=%s, rules=%d)",
        settings_module, config.shift_start.strftime("%H:%M"), config.late_threshold, len(config.rules),
    )
    return app

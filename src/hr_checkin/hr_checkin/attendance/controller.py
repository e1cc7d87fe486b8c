from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import format_hhmm
from ..common.http import date_range_from_args, error_response
from ..core.exceptions import ValidationError
from ..container import Container
from .model import AttendanceStats, DailySummary

logger = logging.getLogger(__name__)


def summary_to_json(s: DailySummary) -> dict:
    return {
        "date": s.date.isoformat(),
        "check_in": format_hhmm(s.check_in, empty=None),
        "check_out": format_hhmm(s.check_out, empty=None),
        "status": s.status.value,
    }


def stats_to_json(stats: AttendanceStats) -> dict:
    return {"total": stats.total, "on_time": stats.on_time, "late": stats.late}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: str):
        try:
            start, end = date_range_from_args()
            history = container.history_service.get_history(employee_id, start, end)
        except ValidationError as e:
            logger.warning("Attendance history rejected for employee=%s: %s", employee_id, e)
            return error_response(str(e))

        return jsonify(
            {
                "employee_id": employee_id,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "days": [summary_to_json(s) for s in history.summaries],
                "stats": stats_to_json(history.stats),
            }
        )

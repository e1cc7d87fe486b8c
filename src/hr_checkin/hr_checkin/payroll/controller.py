from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..attendance.controller import stats_to_json
from ..common.http import date_range_from_args, error_response
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/penalties", methods=["GET"], endpoint="employee_penalties")
    def employee_penalties(employee_id: str):
        try:
            start, end = date_range_from_args()
            report = container.penalty_report_service.build_penalty_report(
                employee_id=employee_id, start=start, end=end
            )
        except ValidationError as e:
            logger.warning("Penalty report rejected for employee=%s: %s", employee_id, e)
            return error_response(str(e))

        return jsonify(
            {
                "employee_id": report.employee_id,
                "days": [
                    {
                        "date": d.date.isoformat(),
                        "status": d.status.value,
                        "late_minutes": d.late_minutes,
                        "deduction": d.deduction,
                        "charged": list(d.charged),
                    }
                    for d in report.days
                ],
                "stats": stats_to_json(report.stats),
                "total_deduction": report.total_deduction,
                "late_by_threshold": report.late_by_threshold,
            }
        )

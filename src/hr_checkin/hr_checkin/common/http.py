from __future__ import annotations

from datetime import date, timedelta

from flask import jsonify, request

from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.exceptions import ValidationError
from .datetime_utils import now_local, parse_iso_date


def date_range_from_args() -> tuple[date, date]:
    """Read ``start``/``end`` query args; default to the last DEFAULT_HISTORY_DAYS days."""
    today = now_local().date()
    try:
        end = parse_iso_date(request.args["end"]) if request.args.get("end") else today
        start = (
            parse_iso_date(request.args["start"])
            if request.args.get("start")
            else end - timedelta(days=DEFAULT_HISTORY_DAYS)
        )
    except ValueError as e:
        raise ValidationError("dates must be YYYY-MM-DD") from e
    return start, end


def error_response(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status

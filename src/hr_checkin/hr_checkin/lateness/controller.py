from __future__ import annotations

import logging
from dataclasses import replace

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_hhmm
from ..common.http import error_response
from ..core.enums import DeductionPolicy
from ..core.exceptions import ValidationError
from ..container import Container
from .engine import deduction_for
from .model import AttendanceConfig, LatenessRule
from .rules import add_rule, remove_rule

logger = logging.getLogger(__name__)


def config_to_json(config: AttendanceConfig) -> dict:
    return {
        "shift_start": format_hhmm(config.shift_start),
        "late_threshold": config.late_threshold,
        "deduction_policy": config.deduction_policy.value,
        "rules": [{"minutes": r.minutes, "amount": r.amount} for r in config.rules],
    }


def register(app: Flask, container: Container) -> None:
    settings = container.settings_store

    @app.route("/api/lateness/rules", methods=["GET"], endpoint="lateness_rules")
    def lateness_rules():
        return jsonify(config_to_json(settings.get()))

    @app.route("/api/lateness/rules", methods=["POST"], endpoint="lateness_add_rule")
    def lateness_add_rule():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return error_response("request body must be a JSON object")
        try:
            rule = LatenessRule(minutes=data.get("minutes"), amount=data.get("amount"))
            config = settings.update(lambda c: replace(c, rules=add_rule(c.rules, rule)))
        except ValidationError as e:
            logger.warning("Lateness rule rejected: %s (%r)", e, data)
            return error_response(str(e))
        return jsonify(config_to_json(config)), 201

    @app.route("/api/lateness/rules/<int:index>", methods=["DELETE"], endpoint="lateness_remove_rule")
    def lateness_remove_rule(index: int):
        try:
            config = settings.update(lambda c: replace(c, rules=remove_rule(c.rules, index)))
        except ValidationError as e:
            return error_response(str(e), 404)
        return jsonify(config_to_json(config))

    @app.route("/api/lateness/deduction", methods=["POST"], endpoint="lateness_deduction")
    def lateness_deduction():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return error_response("request body must be a JSON object")
        config = settings.get()
        try:
            minutes = data.get("late_minutes")
            if isinstance(minutes, bool) or not isinstance(minutes, int):
                raise ValidationError("late_minutes must be a non-negative integer")
            policy = DeductionPolicy(data["policy"]) if data.get("policy") else config.deduction_policy
            amount = deduction_for(minutes, config.rules, policy)
        except ValueError:
            return error_response("policy must be 'cumulative' or 'highest_band'")
        except ValidationError as e:
            return error_response(str(e))
        return jsonify({"late_minutes": minutes, "policy": policy.value, "deduction": amount})

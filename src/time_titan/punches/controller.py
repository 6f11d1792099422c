from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_timestamp, parse_iso_date
from ..common.request_utils import employee_code_param
from ..common.validators import clamp_limit
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_DAYS, DEFAULT_PUNCH_LIMIT, MAX_HISTORY_DAYS, MAX_PUNCH_LIMIT
from ..core.exceptions import ValidationError
from ..metrics.day_state import DayState


def day_state_json(state: DayState) -> dict:
    return {
        "date": state.day.isoformat(),
        "firstIn": format_timestamp(state.first_in),
        "lastOut": format_timestamp(state.last_out),
        "hoursWorked": state.hours_worked,
        "minutesLeft": state.minutes_left,
        "onTime": state.on_time,
        "punctualityScore": state.punctuality_score,
    }


def register(app: Flask, container: Container) -> None:
    service = container.punch_service

    @app.route("/api/work-progress", methods=["GET"], endpoint="work_progress")
    def work_progress():
        progress = service.work_progress(employee_code_param())
        return jsonify(
            {
                "inTime": format_timestamp(progress.in_time),
                "hoursWorked": progress.hours_worked,
                "minutesLeft": progress.minutes_left,
            }
        )

    @app.route("/api/consistency-streak", methods=["GET"], endpoint="consistency_streak")
    def consistency_streak():
        streak = service.consistency_streak(employee_code_param())
        return jsonify({"count": streak.count, "isActive": streak.is_active})

    @app.route("/api/punches", methods=["GET"], endpoint="punches")
    def punches():
        limit = clamp_limit(request.args.get("limit"), default=DEFAULT_PUNCH_LIMIT, maximum=MAX_PUNCH_LIMIT)
        rows = service.recent_punches(employee_code_param(), limit=limit)
        return jsonify([{"time": format_timestamp(p.timestamp), "action": p.action} for p in rows])

    @app.route("/api/minutes-out", methods=["GET"], endpoint="minutes_out")
    def minutes_out():
        code = employee_code_param()
        total = service.minutes_out(code)
        return jsonify({"empCode": code.strip(), "totalMinutesOut": total})

    @app.route("/api/day-summary", methods=["GET"], endpoint="day_summary")
    def day_summary():
        date_s = request.args.get("date")
        try:
            day = parse_iso_date(date_s) if date_s else None
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")
        return jsonify(day_state_json(service.day_summary(employee_code_param(), day=day)))

    @app.route("/api/history", methods=["GET"], endpoint="history")
    def history():
        days = clamp_limit(
            request.args.get("days"), default=DEFAULT_HISTORY_DAYS, maximum=MAX_HISTORY_DAYS, field_name="days"
        )
        return jsonify([day_state_json(s) for s in service.history(employee_code_param(), days=days)])

    @app.route("/api/badges", methods=["GET"], endpoint="badges")
    def badges():
        return jsonify(
            [
                {
                    "type": b.type.value,
                    "name": b.name,
                    "description": b.description,
                    "icon": b.icon,
                    "earnedOn": b.earned_on.isoformat(),
                }
                for b in service.badges(employee_code_param())
            ]
        )

from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_timestamp
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.highlight_service

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "healthy", "service": "time-titan"})

    @app.route("/api/earliest-checkin", methods=["GET"], endpoint="earliest_checkin")
    def earliest_checkin():
        h = service.earliest_check_in()
        return jsonify({"name": h.name, "cardNo": h.card_number, "checkInTime": format_timestamp(h.time)})

    @app.route("/api/latest-checkout", methods=["GET"], endpoint="latest_checkout")
    def latest_checkout():
        h = service.latest_check_out()
        return jsonify({"name": h.name, "cardNo": h.card_number, "checkOutTime": format_timestamp(h.time)})

    @app.route("/api/recent-activity", methods=["GET"], endpoint="recent_activity")
    def recent_activity():
        return jsonify(
            [
                {"action": item.action, "name": item.name, "time": format_timestamp(item.time)}
                for item in service.recent_activity()
            ]
        )

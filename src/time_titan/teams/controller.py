from __future__ import annotations

from flask import Flask, jsonify

from ..common.request_utils import employee_code_param
from ..container import Container
from ..metrics.team import MemberStats, TeamStats


def team_json(team: TeamStats) -> dict:
    return {
        "teamName": team.team_name,
        "averagePunctuality": team.average_punctuality,
        "onlineCount": team.online_count,
        "membersCount": team.members_count,
    }


def member_json(member: MemberStats) -> dict:
    return {
        "employee": {
            "id": member.employee.employee_id,
            "name": member.employee.display_name,
            "department": member.employee.department,
        },
        "punctualityScore": member.punctuality_score,
        "consistencyStreak": {
            "count": member.consistency_streak.count,
            "isActive": member.consistency_streak.is_active,
        },
        "isOnline": member.is_online,
    }


def register(app: Flask, container: Container) -> None:
    service = container.team_service

    @app.route("/api/team-punctuality", methods=["GET"], endpoint="team_punctuality")
    def team_punctuality():
        report = service.team_punctuality(employee_code_param())
        return jsonify(
            {
                "teams": [team_json(t) for t in report.teams],
                "members": [member_json(m) for m in report.members],
            }
        )

    @app.route("/api/leaderboard/punctuality", methods=["GET"], endpoint="leaderboard_punctuality")
    def leaderboard_punctuality():
        return jsonify([member_json(m) for m in service.punctuality_leaderboard()])

    @app.route("/api/leaderboard/consistency", methods=["GET"], endpoint="leaderboard_consistency")
    def leaderboard_consistency():
        return jsonify([member_json(m) for m in service.consistency_leaderboard()])

    @app.route("/api/leaderboard/teams", methods=["GET"], endpoint="leaderboard_teams")
    def leaderboard_teams():
        return jsonify([team_json(t) for t in service.team_leaderboard()])

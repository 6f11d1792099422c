from __future__ import annotations

import importlib
from datetime import datetime

import pytest

from time_titan import create_app
from time_titan.config import production
from time_titan.container import build_services
from time_titan.core.exceptions import UpstreamError


@pytest.fixture
def frozen_clock(monkeypatch, fixed_now):
    for module in ("time_titan.punches.service", "time_titan.dashboard.service", "time_titan.teams.service"):
        monkeypatch.setattr(f"{module}.now_local", lambda: fixed_now)
    return fixed_now


@pytest.fixture
def container(punches, directory):
    directory.add("30874", "Lan Pham", department="Ops", card="7781")
    directory.add("30875", "Minh Tran", department="Ops", card="7782")

    punches.add("30874", datetime(2026, 2, 3, 9, 5), "In", card="7781")
    punches.add("30874", datetime(2026, 2, 3, 18, 40), "Out", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 8, 50), "In", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 9, 30), "Out", card="7781")
    punches.add("30874", datetime(2026, 2, 4, 10, 0), "In", card="7781")
    punches.add("30875", datetime(2026, 2, 4, 9, 16), "In", card="7782")
    return build_services(punches, directory)


@pytest.fixture
def client(container, frozen_clock):
    app = create_app(container, settings_module="time_titan.config.testing")
    return app.test_client()


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.get_json()["status"] == "healthy"


def test_work_progress(client):
    r = client.get("/api/work-progress?empCode=30874")

    assert r.status_code == 200
    body = r.get_json()
    assert body["inTime"] == "2026-02-04T08:50:00"
    assert body["hoursWorked"] == pytest.approx(1.5)
    assert body["minutesLeft"] == pytest.approx(450)


def test_missing_identifier_is_a_400(client):
    for path in ("/api/work-progress", "/api/consistency-streak", "/api/minutes-out", "/api/punches"):
        r = client.get(path)
        assert r.status_code == 400, path
        assert r.get_json() == {"message": "empCode is required"}


def test_no_punch_in_is_a_404(client):
    r = client.get("/api/work-progress?empCode=ghost")

    assert r.status_code == 404
    assert r.get_json() == {"message": "No punch-in record found"}


def test_streak_minutes_out_and_punches(client):
    assert client.get("/api/consistency-streak?empCode=30874").get_json() == {"count": 2, "isActive": True}
    assert client.get("/api/minutes-out?empCode=30874").get_json() == {"empCode": "30874", "totalMinutesOut": 30}

    rows = client.get("/api/punches?empCode=30874&limit=2").get_json()
    assert rows == [
        {"time": "2026-02-04T10:00:00", "action": "in"},
        {"time": "2026-02-04T09:30:00", "action": "out"},
    ]


def test_bad_limit_is_a_400(client):
    assert client.get("/api/punches?empCode=30874&limit=abc").status_code == 400


def test_highlights_and_activity(client):
    earliest = client.get("/api/earliest-checkin").get_json()
    latest = client.get("/api/latest-checkout").get_json()
    activity = client.get("/api/recent-activity").get_json()

    assert earliest == {"name": "Lan Pham", "cardNo": "7781", "checkInTime": "2026-02-04T08:50:00"}
    assert latest == {"name": "Lan Pham", "cardNo": "7781", "checkOutTime": "2026-02-03T18:40:00"}
    assert [a["time"] for a in activity] == ["2026-02-04T10:00:00", "2026-02-04T09:30:00", "2026-02-04T09:16:00"]
    assert activity[2]["name"] == "Minh Tran"


def test_team_punctuality(client):
    body = client.get("/api/team-punctuality?empCode=30874").get_json()

    # Lan left at 09:30 after arriving, only Minh is still in

    assert body["teams"] == [{"teamName": "Ops", "averagePunctuality": 80, "onlineCount": 1, "membersCount": 2}]
    assert {m["employee"]["id"] for m in body["members"]} == {"30874", "30875"}


def test_day_summary_validation(client):
    assert client.get("/api/day-summary?empCode=30874&date=04-02-2026").status_code == 400
    assert client.get("/api/day-summary?empCode=30874&date=2026-02-05").status_code == 400

    body = client.get("/api/day-summary?empCode=30874&date=2026-02-03").get_json()
    assert body["firstIn"] == "2026-02-03T09:05:00"
    assert body["onTime"] is True


def test_history_and_badges(client):
    history = client.get("/api/history?empCode=30874&days=7").get_json()

    assert [d["date"] for d in history] == ["2026-02-04", "2026-02-03"]
    badges = client.get("/api/badges?empCode=30874").get_json()
    assert [b["type"] for b in badges] == ["timeMaster"]
    assert badges[0]["earnedOn"] == "2026-02-04"


def test_login_session_supplies_emp_code(client):
    assert client.get("/api/me").status_code == 401
    assert client.post("/api/login", json={"empCode": "nobody"}).status_code == 401

    r = client.post("/api/login", json={"empCode": "7781"})
    assert r.status_code == 200
    assert r.get_json()["id"] == "30874"

    assert client.get("/api/me").get_json()["name"] == "Lan Pham"
    assert client.get("/api/consistency-streak").get_json()["count"] == 2

    client.post("/api/logout")
    assert client.get("/api/consistency-streak").status_code == 400


def test_upstream_failure_is_a_generic_500(container, frozen_clock, monkeypatch):
    def boom(*args, **kwargs):
        raise UpstreamError("Punch database query failed")

    monkeypatch.setattr(container.punches_repo, "first_in_for_day", boom)
    client = create_app(container, settings_module="time_titan.config.testing").test_client()

    r = client.get("/api/work-progress?empCode=30874")

    assert r.status_code == 500
    assert r.get_json() == {"message": "Internal server error"}


def test_unknown_route_is_json_404(client):
    r = client.get("/api/nope")

    assert r.status_code == 404
    assert "message" in r.get_json()


def test_login_rejects_non_object_body(client):
    r = client.post("/api/login", json=["30874"])

    assert r.status_code == 400
    assert r.get_json() == {"message": "Request body must be a JSON object"}


def test_production_requires_a_secret_key(container, monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    importlib.reload(production)

    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        create_app(container, settings_module="time_titan.config.production")

    monkeypatch.setenv("SECRET_KEY", "s3cret")
    importlib.reload(production)
    assert create_app(container, settings_module="time_titan.config.production").secret_key == "s3cret"

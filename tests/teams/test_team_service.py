from __future__ import annotations

from datetime import datetime

import pytest

from time_titan.core.exceptions import ValidationError
from time_titan.teams.service import TeamService


@pytest.fixture
def office(directory, punches):
    directory.add("30874", "Lan Pham", department="Ops")
    directory.add("30875", "Minh Tran", department="Ops")
    directory.add("1415", "An Le", department="Sales")
    directory.add("1416", "Binh Vo")

    punches.add("30874", datetime(2026, 2, 3, 9, 0), "In")
    punches.add("30874", datetime(2026, 2, 4, 9, 0), "In")
    punches.add("30875", datetime(2026, 2, 4, 9, 40), "In")
    punches.add("30875", datetime(2026, 2, 4, 10, 0), "Out")
    punches.add("1415", datetime(2026, 2, 4, 8, 0), "In")
    return TeamService(punches, directory)


def test_team_of_the_requesting_employee(office, fixed_now):
    report = office.team_punctuality("30874", now=fixed_now)

    assert len(report.teams) == 1
    team = report.teams[0]
    assert team.team_name == "Ops"
    assert team.average_punctuality == 80
    assert team.online_count == 1
    assert team.members_count == 2

    by_id = {m.employee.employee_id: m for m in report.members}
    assert by_id["30874"].consistency_streak.count == 2
    assert by_id["30874"].is_online is True
    assert by_id["30875"].punctuality_score == 60
    assert by_id["30875"].is_online is False


def test_no_department_gives_empty_report(office, fixed_now):
    assert office.team_punctuality("1416", now=fixed_now).teams == []
    assert office.team_punctuality("unknown", now=fixed_now).members == []


def test_identifier_required(office, fixed_now):
    with pytest.raises(ValidationError):
        office.team_punctuality(None, now=fixed_now)


def test_leaderboards(office, fixed_now):
    punctual = office.punctuality_leaderboard(now=fixed_now)
    consistent = office.consistency_leaderboard(now=fixed_now)
    teams = office.team_leaderboard(now=fixed_now)

    assert [m.employee.display_name for m in punctual] == ["An Le", "Lan Pham", "Minh Tran", "Binh Vo"]
    assert consistent[0].employee.display_name == "Lan Pham"
    assert [(t.team_name, t.average_punctuality) for t in teams] == [("Sales", 100), ("Ops", 80)]

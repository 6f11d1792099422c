from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.numbers import round_half_up
from ..employees.model import EmployeeIdentity
from .day_state import DayState
from .streak import Streak


@dataclass(frozen=True)
class MemberStats:
    employee: EmployeeIdentity
    punctuality_score: int
    consistency_streak: Streak
    is_online: bool


@dataclass(frozen=True)
class TeamStats:
    team_name: str
    average_punctuality: int
    online_count: int
    members_count: int


def is_online(first_in: Optional[datetime], last_out: Optional[datetime]) -> bool:
    """Arrived today and has not left since arriving."""
    if first_in is None:
        return False
    return last_out is None or last_out < first_in


def member_stats(employee: EmployeeIdentity, today: DayState, streak: Streak) -> MemberStats:
    return MemberStats(
        employee=employee,
        punctuality_score=today.punctuality_score,
        consistency_streak=streak,
        is_online=is_online(today.first_in, today.last_out),
    )


def aggregate_team(team_name: str, members: Sequence[MemberStats]) -> Optional[TeamStats]:
    if not members:
        return None
    average = sum(m.punctuality_score for m in members) / len(members)
    return TeamStats(
        team_name=team_name,
        average_punctuality=round_half_up(average),
        online_count=sum(1 for m in members if m.is_online),
        members_count=len(members),
    )


def top_by_punctuality(members: Sequence[MemberStats], size: int) -> list[MemberStats]:
    return sorted(members, key=lambda m: (-m.punctuality_score, m.employee.display_name))[:size]


def top_by_consistency(members: Sequence[MemberStats], size: int) -> list[MemberStats]:
    return sorted(members, key=lambda m: (-m.consistency_streak.count, m.employee.display_name))[:size]


def rank_teams(teams: Sequence[TeamStats]) -> list[TeamStats]:
    return sorted(teams, key=lambda t: (-t.average_punctuality, t.team_name))

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_identifier
from ..core.constants import LEADERBOARD_SIZE, SHIFT_MINUTES
from ..employees.model import EmployeeIdentity
from ..employees.repository import EmployeeRepository
from ..metrics.day_state import derive_day_state
from ..metrics.factory import PunctualityStrategyFactory
from ..metrics.streak import consistency_streak
from ..metrics.team import (
    MemberStats,
    TeamStats,
    aggregate_team,
    member_stats,
    rank_teams,
    top_by_consistency,
    top_by_punctuality,
)
from ..punches.repository import PunchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamReport:
    teams: list[TeamStats] = field(default_factory=list)
    members: list[MemberStats] = field(default_factory=list)


class TeamService:
    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: PunctualityStrategyFactory | None = None,
        shift_minutes: int = SHIFT_MINUTES,
    ):
        self._punches = punches
        self._employees = employees
        self._factory = strategy_factory or PunctualityStrategyFactory()
        self._shift_minutes = int(shift_minutes)

    def _member(self, employee: EmployeeIdentity, now: datetime) -> MemberStats:
        today = now.date()
        state = derive_day_state(
            self._punches.punches_for_day(employee.employee_id, today),
            day=today,
            now=now,
            factory=self._factory,
            shift_minutes=self._shift_minutes,
        )
        streak = consistency_streak(self._punches.in_dates(employee.employee_id, today), today=today)
        return member_stats(employee, state, streak)

    def _members(self, employees: Sequence[EmployeeIdentity], now: datetime) -> list[MemberStats]:
        return [self._member(e, now) for e in employees]

    def team_punctuality(self, employee_code: Optional[str], *, now: datetime | None = None) -> TeamReport:
        code = require_identifier(employee_code)
        now = now or now_local()

        employee = self._employees.get_by_id(code)
        if not employee or not employee.department:
            logger.info("No department for employee %s; empty team report", code)
            return TeamReport()

        members = self._members(self._employees.list_by_department(employee.department), now)
        team = aggregate_team(employee.department, members)
        if team is None:
            return TeamReport()
        return TeamReport(teams=[team], members=members)

    def punctuality_leaderboard(self, *, now: datetime | None = None) -> list[MemberStats]:
        members = self._members(self._employees.list_all(), now or now_local())
        return top_by_punctuality(members, LEADERBOARD_SIZE)

    def consistency_leaderboard(self, *, now: datetime | None = None) -> list[MemberStats]:
        members = self._members(self._employees.list_all(), now or now_local())
        return top_by_consistency(members, LEADERBOARD_SIZE)

    def team_leaderboard(self, *, now: datetime | None = None) -> list[TeamStats]:
        now = now or now_local()
        by_department: dict[str, list[EmployeeIdentity]] = {}
        for e in self._employees.list_all():
            if e.department:
                by_department.setdefault(e.department, []).append(e)

        teams: list[TeamStats] = []
        for name, employees in by_department.items():
            team = aggregate_team(name, self._members(employees, now))
            if team is not None:
                teams.append(team)
        return rank_teams(teams)

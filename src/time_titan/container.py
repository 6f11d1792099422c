from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.datetime_utils import parse_clock_time
from .core.constants import ON_TIME_CUTOFF, SHIFT_MINUTES
from .dashboard.service import HighlightService
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .metrics.factory import PunctualityStrategyFactory
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .teams.service import TeamService


@dataclass(frozen=True)
class Container:
    punches_repo: PunchRepository
    employees_repo: EmployeeRepository

    punch_service: PunchService
    highlight_service: HighlightService
    team_service: TeamService
    employee_service: EmployeeService

    conn: Optional[DatabaseConnection] = None


def build_services(
    punches_repo: PunchRepository,
    employees_repo: EmployeeRepository,
    *,
    shift_minutes: int = SHIFT_MINUTES,
    on_time_cutoff: str | None = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    cutoff = parse_clock_time(on_time_cutoff) if on_time_cutoff else ON_TIME_CUTOFF
    factory = PunctualityStrategyFactory(cutoff_time=cutoff)

    return Container(
        punches_repo=punches_repo,
        employees_repo=employees_repo,
        punch_service=PunchService(punches_repo, strategy_factory=factory, shift_minutes=shift_minutes),
        highlight_service=HighlightService(punches_repo, employees_repo),
        team_service=TeamService(punches_repo, employees_repo, strategy_factory=factory, shift_minutes=shift_minutes),
        employee_service=EmployeeService(employees_repo),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    shift_minutes: int = SHIFT_MINUTES,
    on_time_cutoff: str | None = None,
    area_id: str | None = None,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        MySQLPunchRepository(conn, area_id=area_id),
        MySQLEmployeeRepository(conn),
        shift_minutes=shift_minutes,
        on_time_cutoff=on_time_cutoff,
        conn=conn,
    )

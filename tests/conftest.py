from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

import pytest

from time_titan.core.enums import Direction
from time_titan.database.mysql_base import text_key
from time_titan.employees.model import EmployeeIdentity
from time_titan.punches.model import ActivityRow, CardPunch, DayBounds, PunchEvent


class InMemoryEmployees:
    def __init__(self, employees: Iterable[EmployeeIdentity] = ()):
        self._employees = list(employees)

    def add(self, employee_id: str, name: str, department: Optional[str] = None, card: Optional[str] = None):
        e = EmployeeIdentity(
            employee_id=employee_id,
            card_number=card or f"C{employee_id}",
            display_name=name,
            department=department,
        )
        self._employees.append(e)
        return e

    def get_by_card(self, card_number: str) -> Optional[EmployeeIdentity]:
        matches = [e for e in self._employees if text_key(e.card_number) == text_key(card_number)]
        return min(matches, key=lambda e: e.employee_id) if matches else None

    def get_by_id(self, employee_id: str) -> Optional[EmployeeIdentity]:
        for e in self._employees:
            if text_key(e.employee_id) == text_key(employee_id):
                return e
        return None

    def list_by_department(self, department: str):
        return sorted((e for e in self._employees if e.department == department), key=lambda e: e.display_name)

    def list_all(self):
        return sorted(self._employees, key=lambda e: e.display_name)


class InMemoryPunches:
    def __init__(self, directory: Optional[InMemoryEmployees] = None):
        self._rows: list[PunchEvent] = []
        self._directory = directory

    def add(self, employee_code: str, ts: datetime, action: str = "In", card: Optional[str] = None) -> PunchEvent:
        p = PunchEvent(
            employee_code=employee_code,
            card_number=card or f"C{employee_code}",
            timestamp=ts,
            action=action.strip().lower(),
        )
        self._rows.append(p)
        return p

    def _for(self, code: str, day: Optional[date] = None) -> list[PunchEvent]:
        rows = [p for p in self._rows if p.employee_code == code]
        if day is not None:
            rows = [p for p in rows if p.timestamp.date() == day]
        return sorted(rows, key=lambda p: p.timestamp)

    def first_in_for_day(self, employee_code: str, day: date) -> Optional[datetime]:
        ins = [p.timestamp for p in self._for(employee_code, day) if p.direction == Direction.IN]
        return min(ins) if ins else None

    def _pick(self, day: date, direction: Direction, *, latest: bool) -> Optional[CardPunch]:
        rows = [p for p in self._rows if p.timestamp.date() == day and p.direction == direction]
        if not rows:
            return None
        rows.sort(key=lambda p: p.card_number)
        rows.sort(key=lambda p: p.timestamp, reverse=latest)
        return CardPunch(card_number=rows[0].card_number, timestamp=rows[0].timestamp)

    def earliest_in_for_day(self, day: date) -> Optional[CardPunch]:
        return self._pick(day, Direction.IN, latest=False)

    def latest_out_for_day(self, day: date) -> Optional[CardPunch]:
        return self._pick(day, Direction.OUT, latest=True)

    def recent_activity(self, limit: int):
        rows = sorted(self._rows, key=lambda p: p.card_number)
        rows.sort(key=lambda p: p.timestamp, reverse=True)
        out = []
        for p in rows[:limit]:
            identity = self._directory.get_by_card(p.card_number) if self._directory else None
            out.append(
                ActivityRow(
                    action=p.action,
                    name=identity.display_name if identity else None,
                    card_number=p.card_number,
                    timestamp=p.timestamp,
                )
            )
        return out

    def in_dates(self, employee_code: str, up_to: date):
        days = {p.timestamp.date() for p in self._for(employee_code) if p.direction == Direction.IN}
        return sorted((d for d in days if d <= up_to), reverse=True)

    def punches_for_day(self, employee_code: str, day: date):
        return self._for(employee_code, day)

    def last_punches(self, employee_code: str, limit: int):
        return list(reversed(self._for(employee_code)))[:limit]

    def day_bounds_between(self, employee_code: str, *, start: date, end: date):
        by_day: dict[date, list[PunchEvent]] = {}
        for p in self._for(employee_code):
            if start <= p.timestamp.date() <= end:
                by_day.setdefault(p.timestamp.date(), []).append(p)
        out = []
        for day, rows in sorted(by_day.items(), reverse=True):
            ins = [p.timestamp for p in rows if p.direction == Direction.IN]
            outs = [p.timestamp for p in rows if p.direction == Direction.OUT]
            out.append(DayBounds(day=day, first_in=min(ins) if ins else None, last_out=max(outs) if outs else None))
        return out


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 4, 10, 20, 0)


@pytest.fixture
def directory() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def punches(directory: InMemoryEmployees) -> InMemoryPunches:
    return InMemoryPunches(directory)

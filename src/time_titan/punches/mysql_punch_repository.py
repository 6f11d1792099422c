from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import as_date, parse_timestamp
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..employees.model import display_name_for
from .model import ActivityRow, CardPunch, DayBounds, PunchEvent
from .repository import PunchRepository

logger = logging.getLogger(__name__)

_IS_IN = "LOWER(TRIM(s.in_out)) = 'in'"
_IS_OUT = "LOWER(TRIM(s.in_out)) = 'out'"
# One directory row per card: cardno is not unique, the lowest employee_id wins
_CARD_KEY = "LOWER(TRIM(CAST(cardno AS CHAR)))"


def _day_range(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def _normalize_action(value: Any) -> str:
    return "" if value is None else str(value).strip().lower()


def row_to_punch(row: Dict[str, Any]) -> Optional[PunchEvent]:
    """Map a punch-log row; rows with an unparseable ATT_DATE are dropped."""
    ts = parse_timestamp(row.get("att_date"))
    if ts is None:
        logger.warning("Skipping punch with unparseable att_date=%r", row.get("att_date"))
        return None
    return PunchEvent(
        employee_code=str(row.get("emp_code") or "").strip(),
        card_number=str(row.get("cardno") or "").strip(),
        timestamp=ts,
        action=_normalize_action(row.get("in_out")),
    )


def row_to_activity(row: Dict[str, Any]) -> Optional[ActivityRow]:
    ts = parse_timestamp(row.get("att_date"))
    if ts is None:
        return None
    # employee_id is NULL when the LEFT JOIN found no directory row
    name = None
    if row.get("employee_id") is not None:
        name = display_name_for(row.get("display_name"), row.get("alt_name"), row.get("cardno"))
    return ActivityRow(
        action=_normalize_action(row.get("in_out")),
        name=name,
        card_number=str(row.get("cardno") or "").strip(),
        timestamp=ts,
    )


def row_to_card_punch(row: Optional[Dict[str, Any]]) -> Optional[CardPunch]:
    if not row:
        return None
    ts = parse_timestamp(row.get("att_date"))
    if ts is None:
        return None
    return CardPunch(card_number=str(row.get("cardno") or "").strip(), timestamp=ts)


class MySQLPunchRepository(PunchRepository):
    """Queries over the SRAW punch log.

    ``area_id`` narrows the global highlight queries (earliest check-in,
    latest check-out) to one reader area when configured.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, area_id: Optional[str] = None):
        self._conn_factory = conn_factory
        self._area_id = area_id

    def _area_clause(self) -> tuple[str, tuple]:
        if self._area_id is None:
            return "", ()
        return " AND s.area_id = %s", (self._area_id,)

    def first_in_for_day(self, employee_code: str, day: date) -> Optional[datetime]:
        start, end = _day_range(day)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.att_date
                FROM sraw s
                WHERE s.emp_code = %s AND {_IS_IN}
                  AND s.att_date >= %s AND s.att_date < %s
                ORDER BY s.att_date ASC
                LIMIT 1
                """,
                (employee_code, start, end),
            )
            row = fetchone(cur)
            if not row:
                return None
            logger.debug("First in for %s on %s: %r", employee_code, day, row["att_date"])
            return parse_timestamp(row["att_date"])

    def earliest_in_for_day(self, day: date) -> Optional[CardPunch]:
        start, end = _day_range(day)
        area, area_params = self._area_clause()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.cardno, s.att_date
                FROM sraw s
                WHERE {_IS_IN} AND s.att_date >= %s AND s.att_date < %s{area}
                ORDER BY s.att_date ASC, s.cardno ASC
                LIMIT 1
                """,
                (start, end) + area_params,
            )
            return row_to_card_punch(fetchone(cur))

    def latest_out_for_day(self, day: date) -> Optional[CardPunch]:
        start, end = _day_range(day)
        area, area_params = self._area_clause()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.cardno, s.att_date
                FROM sraw s
                WHERE {_IS_OUT} AND s.att_date >= %s AND s.att_date < %s{area}
                ORDER BY s.att_date DESC, s.cardno ASC
                LIMIT 1
                """,
                (start, end) + area_params,
            )
            return row_to_card_punch(fetchone(cur))

    def recent_activity(self, limit: int) -> Sequence[ActivityRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.in_out, s.cardno, s.att_date,
                       e.employee_id, e.display_name, e.alt_name
                FROM sraw s
                LEFT JOIN (
                    SELECT d.employee_id, d.display_name, d.alt_name, k.card_key
                    FROM employees d
                    JOIN (
                        SELECT {_CARD_KEY} AS card_key, MIN(employee_id) AS employee_id
                        FROM employees
                        GROUP BY card_key
                    ) k ON k.employee_id = d.employee_id
                ) e ON e.card_key = LOWER(TRIM(CAST(s.cardno AS CHAR)))
                ORDER BY s.att_date DESC, s.cardno ASC
                LIMIT %s
                """,
                (int(limit),),
            )
            rows = [row_to_activity(r) for r in fetchall(cur)]
            return [r for r in rows if r is not None]

    def in_dates(self, employee_code: str, up_to: date) -> Sequence[date]:
        _, end = _day_range(up_to)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT DISTINCT DATE(s.att_date) AS work_date
                FROM sraw s
                WHERE s.emp_code = %s AND {_IS_IN} AND s.att_date < %s
                ORDER BY work_date DESC
                """,
                (employee_code, end),
            )
            out: list[date] = []
            for r in fetchall(cur):
                value = r.get("work_date")
                if isinstance(value, (date, datetime)):
                    out.append(as_date(value))
                else:
                    parsed = parse_timestamp(value)
                    if parsed is not None:
                        out.append(parsed.date())
            return out

    def punches_for_day(self, employee_code: str, day: date) -> Sequence[PunchEvent]:
        start, end = _day_range(day)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.emp_code, s.cardno, s.att_date, s.in_out
                FROM sraw s
                WHERE s.emp_code = %s AND s.att_date >= %s AND s.att_date < %s
                ORDER BY s.att_date ASC
                """,
                (employee_code, start, end),
            )
            rows = [row_to_punch(r) for r in fetchall(cur)]
            return [r for r in rows if r is not None]

    def last_punches(self, employee_code: str, limit: int) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.emp_code, s.cardno, s.att_date, s.in_out
                FROM sraw s
                WHERE s.emp_code = %s
                ORDER BY s.att_date DESC
                LIMIT %s
                """,
                (employee_code, int(limit)),
            )
            rows = [row_to_punch(r) for r in fetchall(cur)]
            return [r for r in rows if r is not None]

    def day_bounds_between(self, employee_code: str, *, start: date, end: date) -> Sequence[DayBounds]:
        range_start, _ = _day_range(start)
        _, range_end = _day_range(end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT DATE(s.att_date) AS work_date,
                       MIN(CASE WHEN {_IS_IN} THEN s.att_date END) AS first_in,
                       MAX(CASE WHEN {_IS_OUT} THEN s.att_date END) AS last_out
                FROM sraw s
                WHERE s.emp_code = %s AND s.att_date >= %s AND s.att_date < %s
                GROUP BY DATE(s.att_date)
                ORDER BY work_date DESC
                """,
                (employee_code, range_start, range_end),
            )
            out: list[DayBounds] = []
            for r in fetchall(cur):
                day = r.get("work_date")
                if not isinstance(day, (date, datetime)):
                    continue
                out.append(
                    DayBounds(
                        day=as_date(day),
                        first_in=parse_timestamp(r.get("first_in")),
                        last_out=parse_timestamp(r.get("last_out")),
                    )
                )
            return out

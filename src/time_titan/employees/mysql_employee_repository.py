from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, text_key
from .model import EmployeeIdentity, display_name_for
from .repository import EmployeeRepository

_COLUMNS = "employee_id, cardno, display_name, alt_name, department"


def row_to_identity(row: Dict[str, Any]) -> EmployeeIdentity:
    department = row.get("department")
    return EmployeeIdentity(
        employee_id=str(row["employee_id"]).strip(),
        card_number=str(row.get("cardno") or "").strip(),
        display_name=display_name_for(row.get("display_name"), row.get("alt_name"), row.get("cardno")),
        department=str(department).strip() if department and str(department).strip() else None,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_card(self, card_number: str) -> Optional[EmployeeIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE LOWER(TRIM(CAST(cardno AS CHAR))) = %s
                ORDER BY employee_id
                LIMIT 1
                """,
                (text_key(card_number),),
            )
            row = fetchone(cur)
            return row_to_identity(row) if row else None

    def get_by_id(self, employee_id: str) -> Optional[EmployeeIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE LOWER(TRIM(CAST(employee_id AS CHAR))) = %s
                LIMIT 1
                """,
                (text_key(employee_id),),
            )
            row = fetchone(cur)
            return row_to_identity(row) if row else None

    def list_by_department(self, department: str) -> Sequence[EmployeeIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE department = %s
                ORDER BY COALESCE(display_name, alt_name, cardno), employee_id
                """,
                (department,),
            )
            return [row_to_identity(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[EmployeeIdentity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                ORDER BY COALESCE(display_name, alt_name, cardno), employee_id
                """
            )
            return [row_to_identity(r) for r in fetchall(cur)]

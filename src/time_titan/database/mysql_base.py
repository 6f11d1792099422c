from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import UpstreamError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield a read cursor; driver failures surface as UpstreamError."""
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise UpstreamError("Punch database is unavailable") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        raise UpstreamError("Punch database query failed") from exc
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    # Drain the rest so a pooled connection goes back clean after LIMIT-less queries.
    if row:
        cur.fetchall()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def text_key(value: Any) -> str:
    """Case/type-insensitive join key for card numbers and employee codes."""
    if value is None:
        return ""
    return str(value).strip().lower()

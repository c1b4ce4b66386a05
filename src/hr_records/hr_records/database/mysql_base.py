from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return normalize_row(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [normalize_row(r) for r in rows or []]


def normalize_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {k: normalize_mysql_value(v) for k, v in row.items()}


def normalize_mysql_value(value: Any) -> Any:
    """Normalize connector values to what the services expect.

    - DATE / DATETIME -> 'YYYY-MM-DD' string (rows carry dates as text)
    - DECIMAL -> int when integral, else float
    - bytearray (BIT / BLOB under the pure connector) -> bool / str
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)

    if isinstance(value, (bytes, bytearray)):
        if len(value) == 1 and value[0] in (0, 1):
            return bool(value[0])
        return bytes(value).decode("utf-8", errors="replace")

    return value

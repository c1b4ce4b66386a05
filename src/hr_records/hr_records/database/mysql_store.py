from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone
from .store import TableStore

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _quote(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid identifier: {name!r}")
    return f"`{name}`"


def _where_clause(where: Optional[Mapping[str, Any]]) -> Tuple[str, tuple]:
    if not where:
        return "", ()
    parts = []
    params = []
    for col, value in where.items():
        if value is None:
            parts.append(f"{_quote(col)} IS NULL")
        else:
            parts.append(f"{_quote(col)}=%s")
            params.append(value)
    return " WHERE " + " AND ".join(parts), tuple(params)


class MySQLTableStore(TableStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def _cursor(self):
        try:
            with db_cursor(self._conn_factory) as (conn, cur):
                yield conn, cur
        except mysql.connector.Error as e:
            raise PersistenceError(e.msg or str(e)) from e

    def select(
        self,
        table: str,
        *,
        columns: Sequence[str] = ("*",),
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> List[Dict[str, Any]]:
        cols = "*" if list(columns) == ["*"] else ", ".join(_quote(c) for c in columns)
        where_sql, params = _where_clause(where)
        sql = f"SELECT {cols} FROM {_quote(table)}{where_sql}"
        if order_by:
            sql += f" ORDER BY {_quote(order_by)} {'ASC' if ascending else 'DESC'}"

        with self._cursor() as (_, cur):
            cur.execute(sql, params)
            return fetchall(cur)

    def select_one(self, table: str, *, where: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        where_sql, params = _where_clause(where)
        with self._cursor() as (_, cur):
            cur.execute(f"SELECT * FROM {_quote(table)}{where_sql} LIMIT 1", params)
            return fetchone(cur)

    def insert(self, table: str, values: Mapping[str, Any]) -> int:
        cols = ", ".join(_quote(c) for c in values)
        placeholders = ", ".join(["%s"] * len(values))
        with self._cursor() as (_, cur):
            cur.execute(
                f"INSERT INTO {_quote(table)} ({cols}) VALUES ({placeholders})",
                tuple(values.values()),
            )
            return int(cur.lastrowid or 0)

    def update(self, table: str, values: Mapping[str, Any], *, where: Mapping[str, Any]) -> int:
        if not where:
            raise ValueError("update requires a where clause")
        assignments = ", ".join(f"{_quote(c)}=%s" for c in values)
        where_sql, where_params = _where_clause(where)
        with self._cursor() as (_, cur):
            cur.execute(
                f"UPDATE {_quote(table)} SET {assignments}{where_sql}",
                tuple(values.values()) + where_params,
            )
            return int(cur.rowcount)

    def delete(self, table: str, *, where: Mapping[str, Any]) -> int:
        if not where:
            raise ValueError("delete requires a where clause")
        where_sql, params = _where_clause(where)
        with self._cursor() as (_, cur):
            cur.execute(f"DELETE FROM {_quote(table)}{where_sql}", params)
            return int(cur.rowcount)

from __future__ import annotations

import re
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable

from ..core.constants import TABLE_ADMINS, TABLE_EMPLOYEE_ACCOUNTS
from .connection import DatabaseConnection, DBConfig


def _connection(db_config: dict) -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_dict(db_config))


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql_file(db_config: dict, path: str | Path) -> None:
    sql = Path(path).read_text(encoding="utf-8")
    sql = _strip_line_comments(_strip_create_db_and_use(sql))

    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    factory = _connection(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _exec_sql_file(db_config, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _exec_sql_file(db_config, seed_path)


def ensure_demo_accounts(db_config: dict) -> None:
    """Upsert one admin and one employee login for local demos.

    Passwords are stored in plaintext, matching how login compares them.
    """
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor(dictionary=True)

        cur.execute(f"SELECT taikhoan FROM `{TABLE_ADMINS}` WHERE taikhoan=%s", ("admin",))
        if cur.fetchone():
            cur.execute(f"UPDATE `{TABLE_ADMINS}` SET matkhau=%s WHERE taikhoan=%s", ("admin123", "admin"))
        else:
            cur.execute(f"INSERT INTO `{TABLE_ADMINS}` (taikhoan, matkhau) VALUES (%s, %s)", ("admin", "admin123"))

        expiry = (date.today() + timedelta(days=365)).isoformat()
        cur.execute(f"SELECT id FROM `{TABLE_EMPLOYEE_ACCOUNTS}` WHERE taikhoan=%s", ("nguyenvana",))
        existing = cur.fetchone()
        if existing:
            cur.execute(
                f"UPDATE `{TABLE_EMPLOYEE_ACCOUNTS}` SET matkhau=%s, thoihan=%s WHERE id=%s",
                ("staff123", expiry, existing["id"]),
            )
        else:
            cur.execute(
                f"""
                INSERT INTO `{TABLE_EMPLOYEE_ACCOUNTS}`
                    (taikhoan, matkhau, holot, ten, ngaysinh, trinhdo, chucvu, donvicongtac,
                     sodienthoai, email, duongdan, thoihan)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    "nguyenvana", "staff123", "Nguyễn Văn", "A", "1990-05-20", "Thạc sĩ",
                    "Giảng viên", "Khoa Kiến trúc", "0905123456", "nguyenvana@example.edu.vn", "", expiry,
                ),
            )

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connection(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

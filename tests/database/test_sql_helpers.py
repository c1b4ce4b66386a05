from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from hr_records.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use, _strip_line_comments
from hr_records.database.mysql_base import normalize_mysql_value
from hr_records.database.mysql_store import _quote, _where_clause


def test_statement_splitter_keeps_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"
    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_schema_header_stripped():
    sql = "-- note\nCREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE t (id INT);"
    cleaned = _strip_line_comments(_strip_create_db_and_use(sql))
    assert list(_iter_sql_statements(cleaned)) == ["CREATE TABLE t (id INT)"]


def test_where_clause_null_and_params():
    sql, params = _where_clause({"danghiviec": False, "thoihan": None})
    assert sql == " WHERE `danghiviec`=%s AND `thoihan` IS NULL"
    assert params == (False,)
    assert _where_clause(None) == ("", ())


def test_identifiers_validated():
    assert _quote("DanhMucChucVu") == "`DanhMucChucVu`"
    with pytest.raises(ValueError):
        _quote("x; DROP TABLE y")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (date(2026, 1, 2), "2026-01-02"),
        (datetime(2026, 1, 2, 3, 4, 5), "2026-01-02"),
        (Decimal("3"), 3),
        (Decimal("2.5"), 2.5),
        ("x", "x"),
        (None, None),
    ],
)
def test_normalize_mysql_value(raw, expected):
    assert normalize_mysql_value(raw) == expected

from __future__ import annotations

from mysql.connector.constants import ClientFlag

from hr_records.database import connection as connection_module
from hr_records.database.connection import DBConfig, DatabaseConnection


def test_connect_reports_matched_rows(monkeypatch):
    captured = {}

    def fake_connect(**kwargs):
        captured.update(kwargs)
        return object()

    monkeypatch.setattr(connection_module.mysql.connector, "connect", fake_connect)
    DatabaseConnection(DBConfig.from_dict({"database": "hr_records_test"})).connect()

    # same-value UPDATE (e.g. unchanged password) must still report 1 row
    assert ClientFlag.FOUND_ROWS in captured["client_flags"]
    assert captured["database"] == "hr_records_test"
    assert captured["charset"] == "utf8mb4"


def test_connect_without_database(monkeypatch):
    captured = {}
    monkeypatch.setattr(connection_module.mysql.connector, "connect", lambda **kw: captured.update(kw))
    DatabaseConnection(DBConfig.from_dict({})).connect(with_database=False)
    assert "database" not in captured

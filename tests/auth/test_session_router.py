from __future__ import annotations

from hr_records.auth.model import EmployeeAccount, UserSession
from hr_records.auth.router import resolve_view
from hr_records.auth.session import SessionHolder
from hr_records.core.enums import SessionKind, View


def test_login_overwrites_previous_session():
    storage = {}
    holder = SessionHolder(storage)
    holder.login(UserSession(SessionKind.EMPLOYEE, "u1"))
    holder.login(UserSession(SessionKind.ADMIN, "admin"))

    current = holder.current()
    assert current == UserSession(SessionKind.ADMIN, "admin")
    assert current.is_admin


def test_logout_clears_slot():
    storage = {"menu_open": ["heThong"]}
    holder = SessionHolder(storage)
    holder.login(UserSession(SessionKind.ADMIN, "admin"))
    holder.logout()
    assert holder.current() is None
    assert storage == {}


def test_garbage_session_kind_reads_as_logged_out():
    assert SessionHolder({"session_kind": "root", "account_id": "x"}).current() is None


def test_resolve_view():
    emp = EmployeeAccount(account_id="u", secret="pw")
    assert resolve_view(None) == View.LOGIN
    assert resolve_view(UserSession(SessionKind.ADMIN, "a")) == View.ADMIN_CONSOLE
    assert resolve_view(UserSession(SessionKind.EMPLOYEE, "u"), emp) == View.EMPLOYEE_CARD
    assert resolve_view(UserSession(SessionKind.EMPLOYEE, "u"), None) == View.LOADING

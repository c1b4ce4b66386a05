from __future__ import annotations

from typing import Optional

from ..core.enums import SessionKind, View
from .model import EmployeeAccount, UserSession


def resolve_view(user_session: Optional[UserSession], employee: Optional[EmployeeAccount] = None) -> View:
    if user_session is None:
        return View.LOGIN
    if user_session.kind == SessionKind.ADMIN:
        return View.ADMIN_CONSOLE
    if user_session.kind == SessionKind.EMPLOYEE and employee is not None:
        return View.EMPLOYEE_CARD
    return View.LOADING

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local, try_parse_iso_date
from ..core.constants import MSG_ACCOUNT_EXPIRED, MSG_INVALID_ACCOUNT, MSG_WRONG_PASSWORD
from ..core.enums import SessionKind
from ..core.exceptions import (
    AccountExpiredError,
    InvalidAccountError,
    ValidationError,
    WrongPasswordError,
)
from .model import EmployeeAccount, UserSession
from .repository import AdminCredentialRepository, EmployeeAccountLookup


def is_expired(account: EmployeeAccount, today: date) -> bool:
    """Expired only when today is strictly after the expiry date.

    An empty or unparseable expiry never expires the account.
    """
    expiry = try_parse_iso_date(account.expiry_date)
    if expiry is None:
        return False
    return today > expiry


class AuthService:
    """Use case: authenticate user (login).

    Thứ tự kiểm tra cố định: bảng quản trị trước, rồi mới tới bảng nhân viên.
    So sánh mật khẩu dạng rõ (giữ nguyên hành vi cũ, lỗ hổng đã biết).
    """

    def __init__(
        self,
        admins: AdminCredentialRepository,
        employees: EmployeeAccountLookup,
        *,
        clock: Callable[[], date] = today_local,
    ):
        self._admins = admins
        self._employees = employees
        self._clock = clock

    def authenticate(self, account_id: str, secret: str) -> UserSession:
        admin = self._admins.get_by_account_id(account_id)
        if admin:
            if admin.secret != secret:
                raise WrongPasswordError(MSG_WRONG_PASSWORD)
            return UserSession(kind=SessionKind.ADMIN, account_id=admin.account_id)

        employee = self._employees.get_by_account_id(account_id)
        if employee:
            if employee.secret != secret:
                raise WrongPasswordError(MSG_WRONG_PASSWORD)
            if is_expired(employee, self._clock()):
                raise AccountExpiredError(MSG_ACCOUNT_EXPIRED)
            return UserSession(kind=SessionKind.EMPLOYEE, account_id=employee.account_id)

        raise InvalidAccountError(MSG_INVALID_ACCOUNT)

    def load_employee(self, user_session: Optional[UserSession]) -> Optional[EmployeeAccount]:
        if not user_session or user_session.kind != SessionKind.EMPLOYEE:
            return None
        return self._employees.get_by_account_id(user_session.account_id)

    def change_admin_password(self, *, account_id: str, old_password: str, new_password: str, confirm_password: str) -> None:
        if new_password != confirm_password:
            raise ValidationError("Mật khẩu mới và xác nhận mật khẩu không khớp.")
        if not new_password:
            raise ValidationError("Mật khẩu mới không được để trống.")

        admin = self._admins.get_by_account_id(account_id)
        if not admin or admin.secret != old_password:
            raise ValidationError("Mật khẩu cũ không đúng.")

        if not self._admins.update_secret(account_id, new_password):
            raise ValidationError("Đổi mật khẩu thất bại")

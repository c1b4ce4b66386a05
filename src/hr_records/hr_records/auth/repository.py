from __future__ import annotations

from typing import Optional, Protocol

from .model import AdminCredential, EmployeeAccount


class AdminCredentialRepository(Protocol):
    def get_by_account_id(self, account_id: str) -> Optional[AdminCredential]:
        raise NotImplementedError

    def update_secret(self, account_id: str, secret: str) -> bool:
        raise NotImplementedError


class EmployeeAccountLookup(Protocol):
    """Tra cứu tài khoản nhân viên theo tên đăng nhập (dùng khi đăng nhập)."""

    def get_by_account_id(self, account_id: str) -> Optional[EmployeeAccount]:
        raise NotImplementedError

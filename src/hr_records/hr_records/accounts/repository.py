from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..auth.model import EmployeeAccount


class EmployeeAccountRepository(Protocol):
    """Giao diện repository cho bảng tài khoản nhân viên (ThongTin)."""

    def list_all(self) -> Sequence[EmployeeAccount]:
        raise NotImplementedError

    def get_by_id(self, account_pk: int) -> Optional[EmployeeAccount]:
        raise NotImplementedError

    def get_by_account_id(self, account_id: str) -> Optional[EmployeeAccount]:
        raise NotImplementedError

    def create(self, account: EmployeeAccount) -> int:
        raise NotImplementedError

    def update(self, account: EmployeeAccount) -> bool:
        raise NotImplementedError

    def delete_by_id(self, account_pk: int) -> bool:
        raise NotImplementedError

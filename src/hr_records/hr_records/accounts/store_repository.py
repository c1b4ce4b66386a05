from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..auth.model import EmployeeAccount
from ..core.constants import TABLE_EMPLOYEE_ACCOUNTS
from ..database.store import TableStore
from .repository import EmployeeAccountRepository


def _to_account(row: Dict[str, Any]) -> EmployeeAccount:
    return EmployeeAccount(
        id=int(row["id"]) if row.get("id") is not None else None,
        account_id=str(row.get("taikhoan") or ""),
        secret=str(row.get("matkhau") or ""),
        last_name=row.get("holot") or "",
        first_name=row.get("ten") or "",
        birth_date=row.get("ngaysinh") or None,
        education=row.get("trinhdo") or "",
        position=row.get("chucvu") or "",
        work_unit=row.get("donvicongtac") or "",
        phone=row.get("sodienthoai") or "",
        email=row.get("email") or "",
        photo_url=row.get("duongdan") or "",
        expiry_date=row.get("thoihan") or None,
    )


def _to_row(account: EmployeeAccount) -> Dict[str, Any]:
    return {
        "taikhoan": account.account_id,
        "matkhau": account.secret,
        "holot": account.last_name,
        "ten": account.first_name,
        "ngaysinh": account.birth_date,
        "trinhdo": account.education,
        "chucvu": account.position,
        "donvicongtac": account.work_unit,
        "sodienthoai": account.phone,
        "email": account.email,
        "duongdan": account.photo_url,
        "thoihan": account.expiry_date,
    }


class StoreEmployeeAccountRepository(EmployeeAccountRepository):
    def __init__(self, store: TableStore):
        self._store = store

    def list_all(self) -> Sequence[EmployeeAccount]:
        rows = self._store.select(TABLE_EMPLOYEE_ACCOUNTS, order_by="id")
        return [_to_account(r) for r in rows]

    def get_by_id(self, account_pk: int) -> Optional[EmployeeAccount]:
        row = self._store.select_one(TABLE_EMPLOYEE_ACCOUNTS, where={"id": int(account_pk)})
        return _to_account(row) if row else None

    def get_by_account_id(self, account_id: str) -> Optional[EmployeeAccount]:
        row = self._store.select_one(TABLE_EMPLOYEE_ACCOUNTS, where={"taikhoan": account_id})
        # Collation may match case or trailing-space variants; login needs an exact match
        if not row or row.get("taikhoan") != account_id:
            return None
        return _to_account(row)

    def create(self, account: EmployeeAccount) -> int:
        return self._store.insert(TABLE_EMPLOYEE_ACCOUNTS, _to_row(account))

    def update(self, account: EmployeeAccount) -> bool:
        return self._store.update(TABLE_EMPLOYEE_ACCOUNTS, _to_row(account), where={"id": int(account.id)}) > 0

    def delete_by_id(self, account_pk: int) -> bool:
        return self._store.delete(TABLE_EMPLOYEE_ACCOUNTS, where={"id": int(account_pk)}) > 0

from __future__ import annotations

from typing import Optional

from ..core.constants import TABLE_ADMINS
from ..database.store import TableStore
from .model import AdminCredential
from .repository import AdminCredentialRepository


class StoreAdminCredentialRepository(AdminCredentialRepository):
    def __init__(self, store: TableStore):
        self._store = store

    def get_by_account_id(self, account_id: str) -> Optional[AdminCredential]:
        row = self._store.select_one(TABLE_ADMINS, where={"taikhoan": account_id})
        if not row or row.get("taikhoan") != account_id:
            return None
        return AdminCredential(account_id=str(row["taikhoan"]), secret=str(row.get("matkhau") or ""))

    def update_secret(self, account_id: str, secret: str) -> bool:
        return self._store.update(TABLE_ADMINS, {"matkhau": secret}, where={"taikhoan": account_id}) > 0

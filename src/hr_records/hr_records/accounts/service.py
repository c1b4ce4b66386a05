from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from ..auth.model import EmployeeAccount
from ..common.datetime_utils import format_dmy
from ..common.validators import contains_folded, optional_iso_date, require_non_empty
from ..core.exceptions import PersistenceError, ValidationError
from ..exports.excel import ExcelFile, build_workbook
from .repository import EmployeeAccountRepository

EXPORT_COLUMNS = [
    "ID",
    "Tài khoản",
    "Họ lót",
    "Tên",
    "Ngày sinh",
    "Trình độ",
    "Chức vụ",
    "Đơn vị công tác",
    "Số điện thoại",
    "Email",
    "Thời hạn",
]


class EmployeeAccountService:
    """Use case: admin quản lý tài khoản nhân viên (thêm/sửa/xóa cứng).

    Bảng ThongTin độc lập với danh sách nhân sự DanhSachNhanVien; hai tập dữ
    liệu không được gộp.
    """

    def __init__(self, accounts: EmployeeAccountRepository):
        self._accounts = accounts

    def load(self) -> List[EmployeeAccount]:
        try:
            return list(self._accounts.list_all())
        except PersistenceError as e:
            raise PersistenceError(f"Lỗi tải danh sách tài khoản: {e}") from e

    def list(self, search_term: str = "", *, accounts: Optional[Sequence[EmployeeAccount]] = None) -> List[EmployeeAccount]:
        accounts = list(accounts) if accounts is not None else self.load()
        if not search_term:
            return accounts
        return [
            a for a in accounts
            if any(
                contains_folded(text, search_term)
                for text in (a.account_id, a.last_name, a.first_name, a.email, a.work_unit)
            )
        ]

    def get(self, account_pk: int) -> Optional[EmployeeAccount]:
        return self._accounts.get_by_id(int(account_pk))

    def validate(self, account: EmployeeAccount, *, is_edit: bool, loaded: Sequence[EmployeeAccount]) -> EmployeeAccount:
        account_id = require_non_empty(account.account_id, "Tài khoản không được để trống.")
        require_non_empty(account.secret, "Mật khẩu không được để trống.")
        first_name = require_non_empty(account.first_name, "Tên không được để trống.")

        others = [a for a in loaded if not is_edit or a.id != account.id]
        if any(a.account_id == account_id for a in others):
            raise ValidationError("Tài khoản đã tồn tại. Vui lòng chọn tài khoản khác.")

        return replace(
            account,
            account_id=account_id,
            first_name=first_name,
            last_name=(account.last_name or "").strip(),
            birth_date=optional_iso_date(account.birth_date, "Ngày sinh"),
            expiry_date=optional_iso_date(account.expiry_date, "Thời hạn"),
            photo_url=(account.photo_url or "").strip(),
        )

    def save(self, account: EmployeeAccount, *, is_edit: bool, loaded: Optional[Sequence[EmployeeAccount]] = None) -> int:
        loaded = list(loaded) if loaded is not None else self.load()
        if is_edit and not any(a.id == account.id for a in loaded):
            raise ValidationError("Tài khoản không tồn tại")

        account = self.validate(account, is_edit=is_edit, loaded=loaded)

        if is_edit:
            try:
                self._accounts.update(account)
            except PersistenceError as e:
                raise PersistenceError(f"Cập nhật thất bại: {e}") from e
            return int(account.id)

        try:
            return self._accounts.create(account)
        except PersistenceError as e:
            raise PersistenceError(f"Thêm mới thất bại: {e}") from e

    def delete(self, account_pk: int, *, confirmed: bool) -> bool:
        if not confirmed:
            return False
        try:
            self._accounts.delete_by_id(int(account_pk))
        except PersistenceError as e:
            raise PersistenceError(f"Xóa thất bại: {e}") from e
        return True

    def export(self, accounts: Sequence[EmployeeAccount]) -> ExcelFile:
        rows = [
            {
                "ID": a.id,
                "Tài khoản": a.account_id,
                "Họ lót": a.last_name,
                "Tên": a.first_name,
                "Ngày sinh": format_dmy(a.birth_date),
                "Trình độ": a.education,
                "Chức vụ": a.position,
                "Đơn vị công tác": a.work_unit,
                "Số điện thoại": a.phone,
                "Email": a.email,
                "Thời hạn": format_dmy(a.expiry_date),
            }
            for a in accounts
        ]
        return build_workbook(rows, sheet_name="ThongTin", filename="DanhSachTaiKhoan.xlsx", columns=EXPORT_COLUMNS)

from __future__ import annotations

import io
from dataclasses import replace

import pytest
from openpyxl import load_workbook

from hr_records.accounts.service import EXPORT_COLUMNS, EmployeeAccountService
from hr_records.accounts.store_repository import StoreEmployeeAccountRepository
from hr_records.auth.model import EmployeeAccount
from hr_records.core.exceptions import ValidationError


@pytest.fixture
def service(store):
    return EmployeeAccountService(StoreEmployeeAccountRepository(store))


def test_list_and_search(service):
    assert [a.account_id for a in service.list()] == ["nguyenvana", "hethan"]
    assert [a.account_id for a in service.list("kiến trúc")] == ["nguyenvana"]
    assert [a.account_id for a in service.list("TRẦN")] == ["hethan"]


def test_create_account(service):
    new_id = service.save(
        EmployeeAccount(account_id=" moi ", secret="pw", first_name="C", expiry_date="2030-01-01"),
        is_edit=False,
    )
    created = service.get(new_id)
    assert created.account_id == "moi"
    assert created.expiry_date == "2030-01-01"


def test_duplicate_account_rejected(service):
    with pytest.raises(ValidationError, match="Tài khoản đã tồn tại"):
        service.save(EmployeeAccount(account_id="hethan", secret="x", first_name="X"), is_edit=False)


def test_required_fields(service):
    with pytest.raises(ValidationError, match="Mật khẩu"):
        service.save(EmployeeAccount(account_id="z", secret="", first_name="Z"), is_edit=False)
    with pytest.raises(ValidationError, match="Tên"):
        service.save(EmployeeAccount(account_id="z", secret="pw", first_name=" "), is_edit=False)


def test_bad_date_rejected(service):
    with pytest.raises(ValidationError, match="Thời hạn"):
        service.save(EmployeeAccount(account_id="z", secret="pw", first_name="Z", expiry_date="31/12/2030"), is_edit=False)


def test_edit_renews_expiry(service):
    acc = service.get(2)
    service.save(replace(acc, expiry_date="2099-01-01"), is_edit=True)
    assert service.get(2).expiry_date == "2099-01-01"


def test_edit_missing_account(service):
    with pytest.raises(ValidationError, match="không tồn tại"):
        service.save(EmployeeAccount(id=42, account_id="x", secret="y", first_name="z"), is_edit=True)


def test_delete_gate(service):
    assert service.delete(2, confirmed=False) is False
    assert service.delete(2, confirmed=True) is True
    assert service.get(2) is None


def test_export_never_contains_passwords(service):
    f = service.export(service.list())
    assert f.filename == "DanhSachTaiKhoan.xlsx"

    ws = load_workbook(io.BytesIO(f.content))["ThongTin"]
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == EXPORT_COLUMNS
    flat = [c for row in rows for c in row if c is not None]
    assert "staff123" not in flat
    assert rows[1][4] == "01-01-1990"

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pytest

from hr_records.container import build_container
from hr_records.core.exceptions import PersistenceError


class InMemoryTableStore:
    """Dict-backed TableStore used by tests (no MySQL needed)."""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = copy.deepcopy(tables or {})
        self.fail_on: set = set()

    def _rows(self, table: str) -> List[Dict[str, Any]]:
        if table in self.fail_on:
            raise PersistenceError(f"table {table} unavailable")
        return self.tables.setdefault(table, [])

    @staticmethod
    def _match(row: Mapping[str, Any], where: Optional[Mapping[str, Any]]) -> bool:
        return all(row.get(k) == v for k, v in (where or {}).items())

    @staticmethod
    def _pk(table: str) -> str:
        return "Id" if table == "DanhSachNhanVien" else "id"

    def select(self, table, *, columns=("*",), where=None, order_by=None, ascending=True):
        rows = [dict(r) for r in self._rows(table) if self._match(r, where)]
        if order_by:
            rows.sort(
                key=lambda r: (r.get(order_by) is None, r.get(order_by) if r.get(order_by) is not None else 0),
                reverse=not ascending,
            )
        if tuple(columns) != ("*",):
            rows = [{c: r.get(c) for c in columns} for r in rows]
        return rows

    def select_one(self, table, *, where):
        rows = self.select(table, where=where)
        return rows[0] if rows else None

    def insert(self, table, values):
        rows = self._rows(table)
        pk = self._pk(table)
        new_id = max((int(r.get(pk) or 0) for r in rows), default=0) + 1
        row = dict(values)
        row.setdefault(pk, new_id)
        rows.append(row)
        return new_id

    def update(self, table, values, *, where):
        count = 0
        for r in self._rows(table):
            if self._match(r, where):
                r.update(values)
                count += 1
        return count

    def delete(self, table, *, where):
        rows = self._rows(table)
        keep = [r for r in rows if not self._match(r, where)]
        removed = len(rows) - len(keep)
        self.tables[table] = keep
        return removed


def _personnel(pk: int, **overrides) -> Dict[str, Any]:
    row = {
        "Id": pk,
        "manv": f"NV{pk:03d}",
        "holot": "Nguyễn Văn",
        "ten": "An",
        "gioitinh": True,
        "ngaysinh": "1980-05-12",
        "noisinh": "Đà Nẵng",
        "nguyenquan": "",
        "noiohiennay": "Hải Châu",
        "sodtdd": "0905000001",
        "trinhdo": "TD001",
        "chucdanh": "CD001",
        "ngaychinhthuc": "2005-09-01",
        "phongban": "PB001",
        "chucvu": "CV001",
        "socccd": "",
        "ngaycap": None,
        "noicap": "",
        "danghiviec": False,
        "email": "",
        "giangvien": False,
        "vithu": pk,
        "ngaythuviec": None,
        "ngayqdtrogiang": None,
        "ngayqdgiangvien": None,
        "thoigiannghiviec": None,
        "hinhanh": "",
        "matkhau": "",
        "hieuluc": "",
    }
    row.update(overrides)
    return row


SEED_TABLES: Dict[str, List[Dict[str, Any]]] = {
    "QuanLy": [{"taikhoan": "admin", "matkhau": "admin123"}],
    "ThongTin": [
        {
            "id": 1,
            "taikhoan": "nguyenvana",
            "matkhau": "staff123",
            "holot": "Nguyễn Văn",
            "ten": "A",
            "ngaysinh": "1990-01-01",
            "trinhdo": "Thạc sĩ",
            "chucvu": "Giảng viên",
            "donvicongtac": "Khoa Kiến trúc",
            "sodienthoai": "0905123456",
            "email": "a@example.edu.vn",
            "duongdan": "",
            "thoihan": "2099-12-31",
        },
        {
            "id": 2,
            "taikhoan": "hethan",
            "matkhau": "pw",
            "holot": "Trần",
            "ten": "B",
            "ngaysinh": None,
            "trinhdo": "",
            "chucvu": "",
            "donvicongtac": "",
            "sodienthoai": "",
            "email": "",
            "duongdan": "",
            "thoihan": "2020-01-01",
        },
    ],
    "DanhMucChucVu": [
        {"id": 1, "machucvu": "CV001", "giatri": "Hiệu trưởng"},
        {"id": 2, "machucvu": "CV003", "giatri": "Nhân viên"},
    ],
    "DanhMucTrinhDo": [
        {"id": 1, "matrinhdo": "TD001", "giatri": "Tiến sĩ", "ghichu": ""},
        {"id": 2, "matrinhdo": "TD002", "giatri": "Thạc sĩ", "ghichu": ""},
        {"id": 3, "matrinhdo": "TD003", "giatri": "Đại học", "ghichu": "Cử nhân, kỹ sư"},
    ],
    "DanhMucPhongBan": [
        {"id": 1, "maphongban": "PB001", "giatri": "Phòng Tổ chức", "sapxep": 1},
        {"id": 2, "maphongban": "PB002", "giatri": "Khoa Kiến trúc", "sapxep": 0},
    ],
    "DanhMucChucDanh": [
        {"id": 1, "machucdanh": "CD001", "giatri": "Giảng viên", "ghichu": ""},
    ],
    "DanhMucNamHoc": [
        {"id": 1, "manamhoc": "2", "giatri": "2025-2026", "macdinh": True},
        {"id": 2, "manamhoc": "1", "giatri": "2024-2025", "macdinh": False},
    ],
    "DanhSachNhanVien": [
        _personnel(1, ten="An", gioitinh=True, trinhdo="TD001", phongban="PB001", giangvien=True),
        _personnel(2, holot="Trần Thị", ten="Bình", gioitinh=False, trinhdo="TD003", phongban="PB001"),
        _personnel(3, holot="Lê", ten="Cường", gioitinh=True, trinhdo="TD003", phongban="PB002", vithu=0),
        _personnel(4, holot="Phạm", ten="Dũng", gioitinh=True, trinhdo="XX9", phongban="PB404"),
        _personnel(5, holot="Hồ", ten="Em", gioitinh=False, danghiviec=True, giangvien=True),
    ],
}


@pytest.fixture
def store() -> InMemoryTableStore:
    return InMemoryTableStore(SEED_TABLES)


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from hr_records.main import create_app

    flask_app = create_app(container=container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    client.post("/", data={"username": "admin", "password": "admin123"})
    return client


@pytest.fixture
def employee_client(client):
    client.post("/", data={"username": "nguyenvana", "password": "staff123"})
    return client

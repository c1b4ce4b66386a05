from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core import constants
from .model import CatalogItem


class CodeStyle(str, Enum):
    PREFIXED = "prefixed"  # CV001, PB002 ...
    NUMERIC = "numeric"  # 1, 2, 3 ...


@dataclass(frozen=True)
class CatalogDefinition:
    """Mô tả một bảng danh mục: tên bảng, cột, cách sinh mã, cột xuất Excel."""

    slug: str
    table: str
    label: str
    noun: str
    code_column: str
    value_column: str
    code_header: str
    sheet_name: str
    filename: str
    menu_id: str
    code_style: CodeStyle = CodeStyle.PREFIXED
    code_prefix: str = ""
    order_by: str = "id"
    allow_add: bool = True
    code_case_insensitive: bool = False
    note_column: Optional[str] = None
    sort_column: Optional[str] = None
    default_column: Optional[str] = None

    @property
    def first_code(self) -> str:
        if self.code_style == CodeStyle.NUMERIC:
            return "1"
        return f"{self.code_prefix}{1:0{constants.CODE_DIGITS}d}"

    def to_item(self, row: Dict[str, Any]) -> CatalogItem:
        sort_order = None
        if self.sort_column:
            raw = row.get(self.sort_column)
            sort_order = int(raw) if raw not in (None, "") else None
        return CatalogItem(
            item_id=int(row["id"]) if row.get("id") is not None else None,
            code=str(row.get(self.code_column) or ""),
            value=str(row.get(self.value_column) or ""),
            note=(row.get(self.note_column) or "") if self.note_column else None,
            sort_order=sort_order,
            is_default=bool(row.get(self.default_column)) if self.default_column else None,
        )

    def to_row(self, item: CatalogItem) -> Dict[str, Any]:
        row: Dict[str, Any] = {self.code_column: item.code, self.value_column: item.value}
        if self.note_column:
            row[self.note_column] = item.note or ""
        if self.sort_column:
            row[self.sort_column] = item.sort_order or 0
        if self.default_column:
            row[self.default_column] = bool(item.is_default)
        return row

    def search_texts(self, item: CatalogItem) -> List[str]:
        texts = [item.code, item.value]
        if self.note_column:
            texts.append(item.note or "")
        if self.sort_column:
            # 0 / empty searches as empty text
            texts.append(str(item.sort_order) if item.sort_order else "")
        if self.default_column:
            texts.append("có" if item.is_default else "không")
        return texts

    def export_columns(self) -> List[str]:
        columns = ["ID", self.code_header, "Giá Trị"]
        if self.note_column:
            columns.append("Ghi Chú")
        if self.sort_column:
            columns.append("Sắp Xếp")
        if self.default_column:
            columns.append("Mặc định")
        return columns

    def export_row(self, item: CatalogItem) -> Dict[str, Any]:
        out: Dict[str, Any] = {"ID": item.item_id, self.code_header: item.code, "Giá Trị": item.value}
        if self.note_column:
            out["Ghi Chú"] = item.note
        if self.sort_column:
            out["Sắp Xếp"] = item.sort_order
        if self.default_column:
            out["Mặc định"] = "Có" if item.is_default else "Không"
        return out


POSITIONS = CatalogDefinition(
    slug="chuc-vu",
    table=constants.TABLE_POSITIONS,
    label="Chức vụ",
    noun="chức vụ",
    code_column="machucvu",
    value_column="giatri",
    code_header="Mã Chức vụ",
    sheet_name="Danh mục Chức vụ",
    filename="DanhMucChucVu.xlsx",
    menu_id="danhMuc-chucVu",
    code_prefix="CV",
)

EDUCATION_LEVELS = CatalogDefinition(
    slug="trinh-do",
    table=constants.TABLE_EDUCATION_LEVELS,
    label="Trình độ",
    noun="trình độ",
    code_column="matrinhdo",
    value_column="giatri",
    code_header="Mã Trình độ",
    sheet_name="DanhMucTrinhDo",
    filename="DanhMucTrinhDo.xlsx",
    menu_id="danhMuc-trinhDo",
    code_prefix="TD",
    allow_add=False,
    note_column="ghichu",
)

DEPARTMENTS = CatalogDefinition(
    slug="phong-ban",
    table=constants.TABLE_DEPARTMENTS,
    label="Khoa, Phòng",
    noun="phòng ban",
    code_column="maphongban",
    value_column="giatri",
    code_header="Mã Phòng ban",
    sheet_name="DanhMucPhongBan",
    filename="DanhMucPhongBan.xlsx",
    menu_id="danhMuc-khoaPhong",
    code_prefix="PB",
    sort_column="sapxep",
)

TITLES = CatalogDefinition(
    slug="chuc-danh",
    table=constants.TABLE_TITLES,
    label="Chức danh",
    noun="chức danh",
    code_column="machucdanh",
    value_column="giatri",
    code_header="Mã Chức danh",
    sheet_name="DanhMucChucDanh",
    filename="DanhMucChucDanh.xlsx",
    menu_id="danhMuc-chucDanh",
    code_prefix="CD",
    note_column="ghichu",
)

ACADEMIC_YEARS = CatalogDefinition(
    slug="nam-hoc",
    table=constants.TABLE_ACADEMIC_YEARS,
    label="Năm học",
    noun="năm học",
    code_column="manamhoc",
    value_column="giatri",
    code_header="Mã Năm học",
    sheet_name="DanhMucNamHoc",
    filename="DanhMucNamHoc.xlsx",
    menu_id="danhMuc-namHoc",
    code_style=CodeStyle.NUMERIC,
    order_by="manamhoc",
    code_case_insensitive=True,
    default_column="macdinh",
)

ALL_CATALOGS = (EDUCATION_LEVELS, TITLES, POSITIONS, DEPARTMENTS, ACADEMIC_YEARS)
CATALOGS_BY_SLUG = {d.slug: d for d in ALL_CATALOGS}

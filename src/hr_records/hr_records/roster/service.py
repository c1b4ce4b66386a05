from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..catalogs.lookup import build_lookup, resolve_code
from ..catalogs.service import CatalogService
from ..common.datetime_utils import format_dmy
from ..common.validators import contains_folded
from ..core.exceptions import PersistenceError, ValidationError
from ..exports.excel import ExcelFile, build_workbook
from .model import RosterEntry, RosterFilters
from .repository import PersonnelRepository

EXPORT_COLUMNS = [
    "STT",
    "ID",
    "Mã NV",
    "Họ lót",
    "Tên",
    "Ngày sinh",
    "Giới tính",
    "Trình độ",
    "Khoa / Phòng",
    "Chức vụ",
    "Chức danh",
    "Giảng viên",
    "Nơi sinh",
    "Nơi ở hiện nay",
    "SĐT",
    "Email",
    "Số CCCD",
    "Ngày cấp",
    "Nơi cấp",
    "Ngày thử việc",
    "Ngày chính thức",
    "Ngày QĐ Trợ giảng",
    "Ngày QĐ Giảng viên",
]


def matches(entry: RosterEntry, filters: RosterFilters, search_term: str = "") -> bool:
    """Free-text search AND every active filter."""
    rec = entry.record
    if search_term and not (
        contains_folded(rec.first_name, search_term) or contains_folded(rec.last_name, search_term)
    ):
        return False
    if filters.gender and rec.is_male != (filters.gender == "Nam"):
        return False
    if filters.education and entry.education != filters.education:
        return False
    if filters.department and entry.department != filters.department:
        return False
    if filters.position and entry.position != filters.position:
        return False
    if filters.title and entry.title != filters.title:
        return False
    if filters.lecturer and rec.is_lecturer != (filters.lecturer == "true"):
        return False
    return True


class RosterService:
    """Use case: tra cứu danh sách nhân sự đang làm việc (chỉ đọc)."""

    def __init__(
        self,
        personnel: PersonnelRepository,
        *,
        education: CatalogService,
        titles: CatalogService,
        departments: CatalogService,
        positions: CatalogService,
    ):
        self._personnel = personnel
        self._education = education
        self._titles = titles
        self._departments = departments
        self._positions = positions

    def load(self) -> List[RosterEntry]:
        try:
            records = self._personnel.list_active()
        except PersistenceError as e:
            raise PersistenceError(f"Lỗi tải danh sách nhân viên: {e}") from e

        education = build_lookup(self._education.load())
        titles = build_lookup(self._titles.load())
        departments = build_lookup(self._departments.load())
        positions = build_lookup(self._positions.load())

        return [
            RosterEntry(
                record=r,
                education=resolve_code(education, r.education_code),
                title=resolve_code(titles, r.title_code),
                department=resolve_code(departments, r.department_code),
                position=resolve_code(positions, r.position_code),
            )
            for r in records
        ]

    def list(
        self,
        filters: Optional[RosterFilters] = None,
        search_term: str = "",
        *,
        entries: Optional[Sequence[RosterEntry]] = None,
    ) -> List[RosterEntry]:
        filters = filters or RosterFilters()
        entries = list(entries) if entries is not None else self.load()
        return [e for e in entries if matches(e, filters, search_term)]

    @staticmethod
    def filter_options(entries: Sequence[RosterEntry]) -> Dict[str, List[str]]:
        def unique(attr: str) -> List[str]:
            return sorted({getattr(e, attr) for e in entries if getattr(e, attr)})

        return {
            "trinhdo": unique("education"),
            "phongban": unique("department"),
            "chucvu": unique("position"),
            "chucdanh": unique("title"),
        }

    def get_entry(self, record_id: int, *, entries: Optional[Sequence[RosterEntry]] = None) -> RosterEntry:
        for e in entries if entries is not None else self.load():
            if e.record.record_id == int(record_id):
                return e
        raise ValidationError("Không tìm thấy nhân sự")

    def lecturer_profile(self, record_id: int, *, entries: Optional[Sequence[RosterEntry]] = None) -> RosterEntry:
        entry = self.get_entry(record_id, entries=entries)
        if not entry.record.is_lecturer:
            raise ValidationError("Nhân sự này không phải là giảng viên")
        return entry

    def export(self, entries: Sequence[RosterEntry]) -> ExcelFile:
        rows = []
        for e in entries:
            r = e.record
            rows.append(
                {
                    "STT": r.sequence,
                    "ID": r.record_id,
                    "Mã NV": r.staff_code,
                    "Họ lót": r.last_name,
                    "Tên": r.first_name,
                    "Ngày sinh": format_dmy(r.birth_date),
                    "Giới tính": r.gender_label,
                    "Trình độ": e.education,
                    "Khoa / Phòng": e.department,
                    "Chức vụ": e.position,
                    "Chức danh": e.title,
                    "Giảng viên": "Có" if r.is_lecturer else "Không",
                    "Nơi sinh": r.birth_place,
                    "Nơi ở hiện nay": r.current_address,
                    "SĐT": r.mobile,
                    "Email": r.email,
                    "Số CCCD": r.citizen_id,
                    "Ngày cấp": format_dmy(r.citizen_id_issued_on),
                    "Nơi cấp": r.citizen_id_issued_at,
                    "Ngày thử việc": format_dmy(r.probation_date),
                    "Ngày chính thức": format_dmy(r.official_date),
                    "Ngày QĐ Trợ giảng": format_dmy(r.assistant_decision_date),
                    "Ngày QĐ Giảng viên": format_dmy(r.lecturer_decision_date),
                }
            )
        return build_workbook(
            rows,
            sheet_name="DanhSachNhanSu",
            filename="DanhSachNhanSu_DAU.xlsx",
            columns=EXPORT_COLUMNS,
            column_width=20,
        )

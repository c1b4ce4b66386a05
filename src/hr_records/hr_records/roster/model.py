from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PersonnelRecord:
    """Hồ sơ nhân sự (bảng DanhSachNhanVien).

    Các mã trình độ / chức danh / phòng ban / chức vụ là khóa lỏng trỏ vào
    bảng danh mục, được tra ở tầng service thay vì JOIN.
    """

    record_id: int
    staff_code: str = ""
    last_name: str = ""
    first_name: str = ""
    is_male: Optional[bool] = None  # NULL gender matches neither gender filter
    birth_date: Optional[str] = None
    birth_place: str = ""
    home_town: str = ""
    current_address: str = ""
    mobile: str = ""
    education_code: str = ""
    title_code: str = ""
    official_date: Optional[str] = None
    department_code: str = ""
    position_code: str = ""
    citizen_id: str = ""
    citizen_id_issued_on: Optional[str] = None
    citizen_id_issued_at: str = ""
    has_left: bool = False
    email: str = ""
    is_lecturer: bool = False
    sequence: int = 0
    probation_date: Optional[str] = None
    assistant_decision_date: Optional[str] = None
    lecturer_decision_date: Optional[str] = None
    left_on: Optional[str] = None
    photo: str = ""
    secret: str = ""
    valid: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}".strip()

    @property
    def gender_label(self) -> str:
        if self.is_male is None:
            return ""
        return "Nam" if self.is_male else "Nữ"


@dataclass(frozen=True)
class RosterEntry:
    """Hồ sơ kèm tên hiển thị đã tra từ danh mục (mất danh mục -> hiện mã thô)."""

    record: PersonnelRecord
    education: str
    title: str
    department: str
    position: str


@dataclass(frozen=True)
class RosterFilters:
    gender: str = ""  # "Nam" / "Nữ"
    education: str = ""
    title: str = ""
    department: str = ""
    position: str = ""
    lecturer: str = ""  # "true" / "false"

    @classmethod
    def from_mapping(cls, data) -> "RosterFilters":
        return cls(
            gender=(data.get("gioitinh") or "").strip(),
            education=(data.get("trinhdo") or "").strip(),
            title=(data.get("chucdanh") or "").strip(),
            department=(data.get("phongban") or "").strip(),
            position=(data.get("chucvu") or "").strip(),
            lecturer=(data.get("giangvien") or "").strip(),
        )

from __future__ import annotations

from enum import Enum


class SessionKind(str, Enum):
    """Loại phiên đăng nhập."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class View(str, Enum):
    """Màn hình được chọn theo trạng thái phiên."""

    LOGIN = "login"
    ADMIN_CONSOLE = "admin_console"
    EMPLOYEE_CARD = "employee_card"
    LOADING = "loading"


class EducationBucket(str, Enum):
    """Nhóm trình độ dùng cho thống kê."""

    PHD = "tien_si"
    MASTERS = "thac_si"
    UNIVERSITY = "dai_hoc"
    COLLEGE = "cao_dang"
    OTHER = "khac"

    @property
    def label(self) -> str:
        return _BUCKET_LABELS[self]


_BUCKET_LABELS = {
    EducationBucket.PHD: "Tiến sĩ",
    EducationBucket.MASTERS: "Thạc sĩ",
    EducationBucket.UNIVERSITY: "Đại học",
    EducationBucket.COLLEGE: "Cao đẳng",
    EducationBucket.OTHER: "Khác (Trung cấp, PT...)",
}

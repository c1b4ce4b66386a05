from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SessionKind


@dataclass(frozen=True)
class AdminCredential:
    """Tài khoản quản trị (bảng QuanLy).

    Lưu ý: mật khẩu lưu dạng rõ (plaintext) - giữ nguyên hành vi hệ thống cũ,
    đây là lỗ hổng bảo mật đã biết.
    """

    account_id: str
    secret: str


@dataclass(frozen=True)
class EmployeeAccount:
    """Tài khoản + hồ sơ rút gọn của nhân viên (bảng ThongTin)."""

    account_id: str
    secret: str
    last_name: str = ""
    first_name: str = ""
    birth_date: Optional[str] = None
    education: str = ""
    position: str = ""
    work_unit: str = ""
    phone: str = ""
    email: str = ""
    photo_url: str = ""
    expiry_date: Optional[str] = None
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}".strip()


@dataclass(frozen=True)
class UserSession:
    """Phiên đăng nhập trong tiến trình; không bao giờ được lưu xuống CSDL."""

    kind: SessionKind
    account_id: str

    @property
    def is_admin(self) -> bool:
        return self.kind == SessionKind.ADMIN

from __future__ import annotations

import io
from dataclasses import dataclass

import qrcode

from ..auth.model import EmployeeAccount
from ..common.images import fallback_avatar_url, resolve_photo_url


def build_qr_payload(employee: EmployeeAccount) -> str:
    return "\n".join(
        [
            f"Họ tên: {employee.last_name} {employee.first_name}",
            f"Trình độ: {employee.education}",
            f"Chức vụ: {employee.position}",
            f"Đơn vị: {employee.work_unit}",
            f"SĐT: {employee.phone}",
            f"Email: {employee.email}",
        ]
    )


def render_qr_png(payload: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=8,
        border=2,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@dataclass(frozen=True)
class CardView:
    employee: EmployeeAccount
    photo_url: str
    fallback_photo_url: str
    qr_payload: str


def build_card(employee: EmployeeAccount) -> CardView:
    fallback = fallback_avatar_url(f"{employee.last_name} {employee.first_name}")
    return CardView(
        employee=employee,
        photo_url=resolve_photo_url(employee.photo_url) or fallback,
        fallback_photo_url=fallback,
        qr_payload=build_qr_payload(employee),
    )

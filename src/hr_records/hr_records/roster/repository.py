from __future__ import annotations

from typing import Any, Dict, Protocol, Sequence

from ..core.constants import TABLE_PERSONNEL
from ..database.store import TableStore
from .model import PersonnelRecord


class PersonnelRepository(Protocol):
    def list_active(self) -> Sequence[PersonnelRecord]:
        raise NotImplementedError


def _to_record(r: Dict[str, Any]) -> PersonnelRecord:
    return PersonnelRecord(
        record_id=int(r["Id"]),
        staff_code=r.get("manv") or "",
        last_name=r.get("holot") or "",
        first_name=r.get("ten") or "",
        is_male=None if r.get("gioitinh") is None else bool(r.get("gioitinh")),
        birth_date=r.get("ngaysinh") or None,
        birth_place=r.get("noisinh") or "",
        home_town=r.get("nguyenquan") or "",
        current_address=r.get("noiohiennay") or "",
        mobile=r.get("sodtdd") or "",
        education_code=r.get("trinhdo") or "",
        title_code=r.get("chucdanh") or "",
        official_date=r.get("ngaychinhthuc") or None,
        department_code=r.get("phongban") or "",
        position_code=r.get("chucvu") or "",
        citizen_id=r.get("socccd") or "",
        citizen_id_issued_on=r.get("ngaycap") or None,
        citizen_id_issued_at=r.get("noicap") or "",
        has_left=bool(r.get("danghiviec")),
        email=r.get("email") or "",
        is_lecturer=bool(r.get("giangvien")),
        sequence=int(r.get("vithu") or 0),
        probation_date=r.get("ngaythuviec") or None,
        assistant_decision_date=r.get("ngayqdtrogiang") or None,
        lecturer_decision_date=r.get("ngayqdgiangvien") or None,
        left_on=r.get("thoigiannghiviec") or None,
        photo=r.get("hinhanh") or "",
        secret=r.get("matkhau") or "",
        valid=str(r.get("hieuluc") or ""),
    )


class StorePersonnelRepository(PersonnelRepository):
    def __init__(self, store: TableStore):
        self._store = store

    def list_active(self) -> Sequence[PersonnelRecord]:
        # Soft delete: danghiviec = true never leaves this repository
        rows = self._store.select(TABLE_PERSONNEL, where={"danghiviec": False}, order_by="vithu", ascending=True)
        return [_to_record(r) for r in rows]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

from ..catalogs.lookup import build_lookup
from ..catalogs.service import CatalogService
from ..common.validators import fold
from ..core.enums import EducationBucket
from ..roster.repository import PersonnelRepository

# Thứ tự kiểm tra quan trọng: nhóm khớp đầu tiên được chọn.
EDUCATION_KEYWORDS: Tuple[Tuple[EducationBucket, Tuple[str, ...]], ...] = (
    (EducationBucket.PHD, ("tiến sĩ", "ts")),
    (EducationBucket.MASTERS, ("thạc sĩ", "ths")),
    (EducationBucket.UNIVERSITY, ("đại học", "đh", "cử nhân", "kỹ sư", "kiến trúc sư")),
    (EducationBucket.COLLEGE, ("cao đẳng", "cđ")),
)


def classify_education(display_value: str) -> EducationBucket:
    name = fold(display_value)
    for bucket, keywords in EDUCATION_KEYWORDS:
        if any(k in name for k in keywords):
            return bucket
    return EducationBucket.OTHER


def lecturer_ratio(lecturers: int, total: int) -> str:
    """Percentage with one decimal, or '0' for an empty roster."""
    if total <= 0:
        return "0"
    return f"{lecturers / total * 100:.1f}"


@dataclass(frozen=True)
class DashboardStats:
    total: int = 0
    male: int = 0
    female: int = 0
    lecturers: int = 0
    education: Dict[EducationBucket, int] = field(default_factory=lambda: {b: 0 for b in EducationBucket})

    @property
    def lecturer_ratio(self) -> str:
        return lecturer_ratio(self.lecturers, self.total)

    def education_share(self, bucket: EducationBucket) -> float:
        if self.total <= 0:
            return 0.0
        return self.education.get(bucket, 0) / self.total * 100


class DashboardService:
    def __init__(self, personnel: PersonnelRepository, education: CatalogService):
        self._personnel = personnel
        self._education = education

    def build_stats(self) -> DashboardStats:
        employees = self._personnel.list_active()
        return compute_stats(employees, build_lookup(self._education.load()))


def compute_stats(employees: Sequence, education_lookup: Dict[str, str]) -> DashboardStats:
    male = 0
    female = 0
    lecturers = 0
    edu_count = {b: 0 for b in EducationBucket}

    for emp in employees:
        if emp.is_male:  # NULL counts as female
            male += 1
        else:
            female += 1

        if emp.is_lecturer:
            lecturers += 1

        # Không tìm thấy danh mục -> chuỗi rỗng -> nhóm "Khác"
        edu_count[classify_education(education_lookup.get(emp.education_code, ""))] += 1

    return DashboardStats(
        total=len(employees),
        male=male,
        female=female,
        lecturers=lecturers,
        education=edu_count,
    )

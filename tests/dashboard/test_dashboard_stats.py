from __future__ import annotations

import pytest

from hr_records.core.enums import EducationBucket
from hr_records.dashboard.service import DashboardStats, classify_education, compute_stats, lecturer_ratio
from hr_records.roster.model import PersonnelRecord


@pytest.mark.parametrize(
    "value, bucket",
    [
        ("Tiến sĩ khoa học", EducationBucket.PHD),
        ("TS", EducationBucket.PHD),
        ("Thạc sĩ", EducationBucket.MASTERS),
        ("Đại học", EducationBucket.UNIVERSITY),
        ("Kỹ sư xây dựng", EducationBucket.UNIVERSITY),
        ("Cao đẳng", EducationBucket.COLLEGE),
        ("Trung cấp", EducationBucket.OTHER),
        ("", EducationBucket.OTHER),
    ],
)
def test_classify_education(value, bucket):
    assert classify_education(value) == bucket


def test_lecturer_ratio_format():
    assert lecturer_ratio(0, 0) == "0"
    assert lecturer_ratio(1, 3) == "33.3"
    assert lecturer_ratio(2, 2) == "100.0"


def test_compute_stats_counts():
    employees = [
        PersonnelRecord(record_id=1, is_male=True, is_lecturer=True, education_code="T1"),
        PersonnelRecord(record_id=2, is_male=False, education_code="T2"),
        PersonnelRecord(record_id=3, is_male=True, education_code="??"),
    ]
    stats = compute_stats(employees, {"T1": "Tiến sĩ", "T2": "Đại học"})

    assert (stats.total, stats.male, stats.female, stats.lecturers) == (3, 2, 1, 1)
    assert stats.lecturer_ratio == "33.3"
    assert stats.education[EducationBucket.PHD] == 1
    assert stats.education[EducationBucket.UNIVERSITY] == 1
    assert stats.education[EducationBucket.OTHER] == 1
    assert sum(stats.education.values()) == stats.total


def test_empty_stats():
    stats = DashboardStats()
    assert stats.lecturer_ratio == "0"
    assert stats.education_share(EducationBucket.PHD) == 0.0


def test_build_stats_excludes_inactive(container):
    stats = container.dashboard_service.build_stats()
    assert stats.total == 4
    assert (stats.male, stats.female) == (3, 1)
    assert stats.lecturer_ratio == "25.0"
    assert stats.education[EducationBucket.UNIVERSITY] == 2
    assert stats.education[EducationBucket.OTHER] == 1

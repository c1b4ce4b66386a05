"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services: in số liệu tổng quan
và mã chức vụ kế tiếp.
"""

import importlib

from config import get_settings_module

from hr_records.catalogs.definitions import POSITIONS
from hr_records.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    stats = container.dashboard_service.build_stats()
    print(f"Tổng nhân sự: {stats.total} (nam {stats.male}, nữ {stats.female})")
    print(f"Tỷ lệ giảng viên: {stats.lecturer_ratio}%")
    for bucket, count in stats.education.items():
        print(f"  {bucket.label}: {count}")

    print("Mã chức vụ kế tiếp:", container.catalog(POSITIONS.slug).generate_next_code())


if __name__ == "__main__":
    main()

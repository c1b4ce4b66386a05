from __future__ import annotations

import io

import pytest
from openpyxl import load_workbook

from hr_records.catalogs.definitions import (
    ACADEMIC_YEARS,
    DEPARTMENTS,
    EDUCATION_LEVELS,
    POSITIONS,
    TITLES,
)
from hr_records.catalogs.lookup import build_lookup, resolve_code
from hr_records.catalogs.model import CatalogItem
from hr_records.catalogs.service import CatalogService, next_numeric_code, next_prefixed_code
from hr_records.core.exceptions import PersistenceError, ValidationError


def test_next_prefixed_code_does_not_fill_gaps():
    assert next_prefixed_code(["CV001", "CV003"], "CV") == "CV004"


def test_next_prefixed_code_ignores_foreign_codes():
    assert next_prefixed_code(["XX999", "cv010", "CVabc", ""], "CV") == "CV001"
    assert next_prefixed_code([], "PB") == "PB001"


def test_next_numeric_code():
    assert next_numeric_code(["1", "2", "7"]) == "8"
    assert next_numeric_code([]) == "1"
    assert next_numeric_code(["0", "-3", "abc"]) == "1"


def test_generate_next_code_reads_store(store):
    assert CatalogService(store, POSITIONS).generate_next_code() == "CV004"
    assert CatalogService(store, ACADEMIC_YEARS).generate_next_code() == "3"


def test_generate_next_code_falls_back_on_store_error(store):
    store.fail_on.add(POSITIONS.table)
    assert CatalogService(store, POSITIONS).generate_next_code() == "CV001"


def test_load_error_is_wrapped(store):
    store.fail_on.add(DEPARTMENTS.table)
    with pytest.raises(PersistenceError, match="Lỗi khi tải danh mục"):
        CatalogService(store, DEPARTMENTS).load()


def test_academic_years_listed_by_code(store):
    items = CatalogService(store, ACADEMIC_YEARS).list()
    assert [i.code for i in items] == ["1", "2"]


def test_search_is_case_insensitive_over_code_and_value(store):
    svc = CatalogService(store, POSITIONS)
    assert [i.code for i in svc.list("hiệu")] == ["CV001"]
    assert [i.code for i in svc.list("cv003")] == ["CV003"]
    assert svc.list("") == svc.list()


def test_search_default_flag_and_sort_order(store):
    years = CatalogService(store, ACADEMIC_YEARS)
    assert [i.code for i in years.list("có")] == ["2"]

    deps = CatalogService(store, DEPARTMENTS)
    # sapxep = 0 is searchable as empty text only
    assert [i.code for i in deps.list("1")] == ["PB001"]


def test_add_appends_with_generated_code(store):
    svc = CatalogService(store, POSITIONS)
    item = svc.new_item()
    assert item.code == "CV004"

    svc.save(CatalogItem(item_id=None, code=item.code, value="  Phó hiệu trưởng "), is_edit=False)
    added = svc.list("Phó")
    assert len(added) == 1
    assert added[0].code == "CV004"
    assert added[0].value == "Phó hiệu trưởng"


def test_add_rejects_duplicate_code(store):
    svc = CatalogService(store, POSITIONS)
    with pytest.raises(ValidationError, match="Mã chức vụ đã tồn tại"):
        svc.save(CatalogItem(item_id=None, code="CV001", value="Khác"), is_edit=False)


def test_add_rejects_duplicate_value_ignoring_case(store):
    svc = CatalogService(store, POSITIONS)
    with pytest.raises(ValidationError, match="Giá trị chức vụ đã tồn tại"):
        svc.save(CatalogItem(item_id=None, code="CV009", value=" HIỆU TRƯỞNG "), is_edit=False)


def test_empty_value_rejected(store):
    svc = CatalogService(store, POSITIONS)
    with pytest.raises(ValidationError, match="Giá trị không được để trống"):
        svc.save(CatalogItem(item_id=None, code="CV009", value="   "), is_edit=False)


def test_academic_year_code_compare_ignores_case_and_spaces(store):
    svc = CatalogService(store, ACADEMIC_YEARS)
    with pytest.raises(ValidationError):
        svc.save(CatalogItem(item_id=None, code=" 1 ", value="2030-2031", is_default=False), is_edit=False)


def test_edit_keeps_stored_code_and_allows_own_value(store):
    svc = CatalogService(store, POSITIONS)
    svc.save(CatalogItem(item_id=1, code="HACKED", value="Hiệu trưởng"), is_edit=True)
    item = svc.get(1)
    assert item.code == "CV001"
    assert item.value == "Hiệu trưởng"


def test_edit_rejects_value_of_another_row(store):
    svc = CatalogService(store, POSITIONS)
    with pytest.raises(ValidationError):
        svc.save(CatalogItem(item_id=1, code="CV001", value="nhân viên"), is_edit=True)


def test_edit_unknown_row(store):
    svc = CatalogService(store, TITLES)
    with pytest.raises(ValidationError, match="Không tìm thấy"):
        svc.save(CatalogItem(item_id=99, code="CD099", value="X", note=""), is_edit=True)


def test_education_levels_have_no_add(store):
    svc = CatalogService(store, EDUCATION_LEVELS)
    with pytest.raises(ValidationError):
        svc.new_item()
    with pytest.raises(ValidationError):
        svc.save(CatalogItem(item_id=None, code="TD009", value="Trung cấp", note=""), is_edit=False)

    svc.save(CatalogItem(item_id=3, code="TD003", value="Đại học", note="ghi chú mới"), is_edit=True)
    assert svc.get(3).note == "ghi chú mới"


def test_delete_requires_confirmation(store):
    svc = CatalogService(store, POSITIONS)
    assert svc.delete(1, confirmed=False) is False
    assert len(svc.list()) == 2

    assert svc.delete(1, confirmed=True) is True
    assert [i.code for i in svc.list()] == ["CV003"]


def test_delete_failure_is_prefixed(store):
    svc = CatalogService(store, POSITIONS)
    store.fail_on.add(POSITIONS.table)
    with pytest.raises(PersistenceError, match="^Xóa thất bại: "):
        svc.delete(1, confirmed=True)


def test_export_headers_and_rows(store):
    svc = CatalogService(store, DEPARTMENTS)
    f = svc.export(svc.list())
    assert f.filename == "DanhMucPhongBan.xlsx"

    ws = load_workbook(io.BytesIO(f.content)).active
    rows = list(ws.iter_rows(values_only=True))
    assert rows[0] == ("ID", "Mã Phòng ban", "Giá Trị", "Sắp Xếp")
    assert rows[1][1] == "PB001"
    assert len(rows) == 3


def test_lookup_first_row_wins_and_raw_code_fallback():
    lookup = build_lookup(
        [
            CatalogItem(item_id=1, code="A", value="first"),
            CatalogItem(item_id=2, code="A", value="second"),
        ]
    )
    assert resolve_code(lookup, "A") == "first"
    assert resolve_code(lookup, "ZZ") == "ZZ"

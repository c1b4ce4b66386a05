from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import List, Optional, Sequence

from ..common.validators import contains_folded, fold, require_non_empty
from ..core.constants import CODE_DIGITS, MSG_EMPTY_VALUE
from ..core.exceptions import PersistenceError, ValidationError
from ..database.store import TableStore
from ..exports.excel import ExcelFile, build_workbook
from .definitions import CatalogDefinition, CodeStyle
from .model import CatalogItem

logger = logging.getLogger(__name__)


def next_prefixed_code(codes: Sequence[str], prefix: str, digits: int = CODE_DIGITS) -> str:
    """max(numeric suffix) + 1, zero padded; gaps are never reused."""
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)")
    numbers = []
    for code in codes:
        m = pattern.match(str(code or ""))
        if m:
            numbers.append(int(m.group(1)))
    return f"{prefix}{max(numbers, default=0) + 1:0{digits}d}"


def next_numeric_code(codes: Sequence[str]) -> str:
    numbers = []
    for code in codes:
        m = re.match(r"^\s*(\d+)", str(code or ""))
        if m and int(m.group(1)) > 0:
            numbers.append(int(m.group(1)))
    return str(max(numbers, default=0) + 1)


class CatalogService:
    """Use case: quản lý một bảng danh mục (liệt kê, sinh mã, lưu, xóa, xuất Excel).

    Kiểm tra trùng mã/giá trị chạy trên danh sách đã tải, không kiểm tra lại
    trên server; hai người thêm cùng lúc có thể sinh trùng mã (đã biết).
    """

    def __init__(self, store: TableStore, definition: CatalogDefinition):
        self._store = store
        self.definition = definition

    def load(self) -> List[CatalogItem]:
        d = self.definition
        try:
            rows = self._store.select(d.table, order_by=d.order_by, ascending=True)
        except PersistenceError as e:
            raise PersistenceError(f"Lỗi khi tải danh mục {d.label}: {e}") from e
        return [d.to_item(r) for r in rows]

    def list(self, search_term: str = "", *, items: Optional[Sequence[CatalogItem]] = None) -> List[CatalogItem]:
        items = list(items) if items is not None else self.load()
        if not search_term:
            return items
        return [
            item for item in items
            if any(contains_folded(text, search_term) for text in self.definition.search_texts(item))
        ]

    def get(self, item_id: int, *, items: Optional[Sequence[CatalogItem]] = None) -> Optional[CatalogItem]:
        for item in items if items is not None else self.load():
            if item.item_id == item_id:
                return item
        return None

    def generate_next_code(self) -> str:
        d = self.definition
        try:
            rows = self._store.select(d.table, columns=(d.code_column,))
        except PersistenceError as e:
            logger.error("Error fetching existing %s: %s", d.code_column, e)
            return d.first_code

        codes = [str(r.get(d.code_column) or "") for r in rows]
        if d.code_style == CodeStyle.NUMERIC:
            return next_numeric_code(codes)
        return next_prefixed_code(codes, d.code_prefix)

    def new_item(self) -> CatalogItem:
        d = self.definition
        if not d.allow_add:
            raise ValidationError(f"Danh mục {d.label} không hỗ trợ thêm mới")
        return CatalogItem(
            item_id=None,
            code=self.generate_next_code(),
            value="",
            note="" if d.note_column else None,
            sort_order=0 if d.sort_column else None,
            is_default=False if d.default_column else None,
        )

    def _codes_equal(self, a: str, b: str) -> bool:
        if self.definition.code_case_insensitive:
            return fold(a) == fold(b)
        return str(a or "") == str(b or "")

    def validate(self, item: CatalogItem, *, is_edit: bool, loaded: Sequence[CatalogItem]) -> CatalogItem:
        d = self.definition
        value = require_non_empty(item.value, MSG_EMPTY_VALUE)
        item = replace(item, value=value)

        if is_edit:
            existing = next((x for x in loaded if x.item_id == item.item_id), None)
            if existing is None:
                raise ValidationError(f"Không tìm thấy {d.noun}")
            # Mã không được sửa khi hiệu chỉnh
            item = item.with_code(existing.code)
        elif not d.allow_add:
            raise ValidationError(f"Danh mục {d.label} không hỗ trợ thêm mới")
        else:
            require_non_empty(item.code, f"Mã {d.noun} không được để trống.")
            if any(self._codes_equal(x.code, item.code) for x in loaded):
                raise ValidationError(f"Mã {d.noun} đã tồn tại. Vui lòng chọn mã khác.")

        others = [x for x in loaded if not is_edit or x.item_id != item.item_id]
        if any(fold(x.value) == fold(item.value) for x in others):
            raise ValidationError(f"Giá trị {d.noun} đã tồn tại. Vui lòng nhập giá trị khác.")

        return item

    def save(self, item: CatalogItem, *, is_edit: bool, loaded: Optional[Sequence[CatalogItem]] = None) -> int:
        d = self.definition
        loaded = list(loaded) if loaded is not None else self.load()
        item = self.validate(item, is_edit=is_edit, loaded=loaded)
        row = d.to_row(item)

        if is_edit:
            try:
                self._store.update(d.table, row, where={"id": item.item_id})
            except PersistenceError as e:
                raise PersistenceError(f"Cập nhật thất bại: {e}") from e
            logger.info("Updated %s id=%s", d.table, item.item_id)
            return int(item.item_id)

        try:
            new_id = self._store.insert(d.table, row)
        except PersistenceError as e:
            raise PersistenceError(f"Thêm mới thất bại: {e}") from e
        logger.info("Inserted %s code=%s", d.table, item.code)
        return new_id

    def delete(self, item_id: int, *, confirmed: bool) -> bool:
        if not confirmed:
            return False
        try:
            self._store.delete(self.definition.table, where={"id": int(item_id)})
        except PersistenceError as e:
            raise PersistenceError(f"Xóa thất bại: {e}") from e
        logger.info("Deleted %s id=%s", self.definition.table, item_id)
        return True

    def export(self, items: Sequence[CatalogItem]) -> ExcelFile:
        d = self.definition
        return build_workbook(
            [d.export_row(x) for x in items],
            sheet_name=d.sheet_name,
            filename=d.filename,
            columns=d.export_columns(),
        )

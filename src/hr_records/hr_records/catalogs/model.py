from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class CatalogItem:
    """Một dòng danh mục (chức vụ, trình độ, phòng ban, chức danh, năm học).

    ``note`` / ``sort_order`` / ``is_default`` chỉ có ở một số danh mục.
    """

    item_id: Optional[int]
    code: str
    value: str
    note: Optional[str] = None
    sort_order: Optional[int] = None
    is_default: Optional[bool] = None

    def with_code(self, code: str) -> "CatalogItem":
        return replace(self, code=code)

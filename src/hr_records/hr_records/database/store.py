from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence


class TableStore(Protocol):
    """Giao diện kho dữ liệu dạng bảng (select/insert/update/delete).

    Lưu ý (DIP): các service phụ thuộc vào interface này, không phụ thuộc trực
    tiếp MySQL. Mọi lỗi backend được ném ra dưới dạng PersistenceError.
    """

    def select(
        self,
        table: str,
        *,
        columns: Sequence[str] = ("*",),
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def select_one(self, table: str, *, where: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def insert(self, table: str, values: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, table: str, values: Mapping[str, Any], *, where: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def delete(self, table: str, *, where: Mapping[str, Any]) -> int:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

DASHBOARD = "dashboard"
ROOT_ID = "heThong"


@dataclass(frozen=True)
class MenuNode:
    id: str
    label: str
    children: Tuple["MenuNode", ...] = ()

    @property
    def has_children(self) -> bool:
        return bool(self.children)


MENU: Tuple[MenuNode, ...] = (
    MenuNode(
        ROOT_ID,
        "Hệ thống",
        (
            MenuNode("hoSoNhanSu", "Hồ sơ Nhân sự"),
            MenuNode("taiKhoan", "Tài khoản Nhân viên"),
            MenuNode("khoaPhong", "Khoa/Phòng"),
            MenuNode("toBoMon", "Tổ Bộ môn"),
            MenuNode("hopDongLaoDong", "Hợp đồng Lao động"),
            MenuNode("luong", "Lương"),
            MenuNode("baoHiem", "Bảo hiểm"),
            MenuNode("daoTao", "Đào tạo"),
            MenuNode("quaTrinhCongTac", "Quá trình công tác"),
            MenuNode("thiDua", "Thi đua"),
            MenuNode("khenThuong", "Khen thưởng"),
            MenuNode("thongKe", "Thống kê"),
            MenuNode(
                "danhMuc",
                "Danh mục",
                (
                    MenuNode("danhMuc-trinhDo", "Trình độ"),
                    MenuNode("danhMuc-chucDanh", "Chức danh"),
                    MenuNode("danhMuc-chucVu", "Chức vụ"),
                    MenuNode("danhMuc-khoaPhong", "Khoa, Phòng"),
                    MenuNode("danhMuc-namHoc", "Năm học"),
                ),
            ),
        ),
    ),
)


def iter_nodes(nodes: Iterable[MenuNode] = MENU) -> Iterator[MenuNode]:
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def find_node(node_id: str) -> Optional[MenuNode]:
    return next((n for n in iter_nodes() if n.id == node_id), None)


def toggle(open_ids: Iterable[str], node_id: str) -> FrozenSet[str]:
    """Flip one node in the open-set; other nodes keep their state."""
    current = frozenset(open_ids)
    if node_id in current:
        return current - {node_id}
    return current | {node_id}

from __future__ import annotations

from hr_records.catalogs.definitions import ALL_CATALOGS
from hr_records.console.menu import ROOT_ID, find_node, iter_nodes, toggle


def test_toggle_flips_only_that_node():
    opened = toggle({ROOT_ID}, "danhMuc")
    assert opened == {ROOT_ID, "danhMuc"}
    assert toggle(opened, "danhMuc") == {ROOT_ID}
    assert toggle(opened, ROOT_ID) == {"danhMuc"}


def test_every_catalog_has_a_menu_leaf():
    ids = {n.id for n in iter_nodes()}
    for d in ALL_CATALOGS:
        assert d.menu_id in ids
        assert not find_node(d.menu_id).has_children


def test_find_node_unknown():
    assert find_node("nope") is None
    assert find_node(ROOT_ID).has_children

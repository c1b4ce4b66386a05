from __future__ import annotations

from typing import Dict, Sequence

from .model import CatalogItem


def build_lookup(items: Sequence[CatalogItem]) -> Dict[str, str]:
    """code -> display value; the first row wins when codes repeat."""
    out: Dict[str, str] = {}
    for item in items:
        out.setdefault(item.code, item.value)
    return out


def resolve_code(lookup: Dict[str, str], code: str) -> str:
    """Display value for a code, or the raw code when no lookup row matches."""
    return lookup.get(code) or code

from __future__ import annotations

import unicodedata
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def fold(value: Any) -> str:
    """Lower-case, trimmed, NFC text used for case/whitespace-insensitive compares."""
    text = "" if value is None else str(value)
    return unicodedata.normalize("NFC", text).lower().strip()


def contains_folded(haystack: Any, needle: str) -> bool:
    text = "" if haystack is None else str(haystack)
    return unicodedata.normalize("NFC", needle).lower() in unicodedata.normalize("NFC", text).lower()


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[str]:
    if not value or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip()).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} không hợp lệ (YYYY-MM-DD)")

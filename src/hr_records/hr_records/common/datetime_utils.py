from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(str(value).strip()[:10])
    except ValueError:
        return None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it easier.
    """
    return datetime.now().date()


def format_dmy(value: Optional[str]) -> str:
    """'YYYY-MM-DD' -> 'DD-MM-YYYY'; anything else is returned unchanged."""
    if not value:
        return ""
    parts = str(value).split("-")
    if len(parts) == 3:
        return f"{parts[2]}-{parts[1]}-{parts[0]}"
    return str(value)

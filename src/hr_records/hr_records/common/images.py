from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote

from ..core.constants import AVATAR_BACKGROUND, AVATAR_COLOR, AVATAR_SIZE, AVATAR_SERVICE_URL, DRIVE_IMAGE_URL

_DRIVE_HOSTS = ("drive.google.com", "docs.google.com")
_DRIVE_FILE_ID = re.compile(r"[-\w]{25,}")


def resolve_photo_url(url: Optional[str]) -> str:
    """Rewrite Google Drive share links to a direct image URL.

    Handles /file/d/<id>/view, open?id=<id> and uc?id=<id> forms by taking the
    first long id-like token. Other URLs are returned trimmed.
    """
    if not url or not url.strip():
        return ""
    url = url.strip()
    if any(host in url for host in _DRIVE_HOSTS):
        m = _DRIVE_FILE_ID.search(url)
        if m:
            return DRIVE_IMAGE_URL.format(file_id=m.group(0))
    return url


def fallback_avatar_url(full_name: str) -> str:
    # Same escaping as JS encodeURIComponent
    name = quote(full_name, safe="-_.!~*'()")
    return (
        f"{AVATAR_SERVICE_URL}?name={name}"
        f"&background={AVATAR_BACKGROUND}&color={AVATAR_COLOR}&size={AVATAR_SIZE}"
    )


def photo_or_fallback(url: Optional[str], full_name: str) -> str:
    return resolve_photo_url(url) or fallback_avatar_url(full_name)

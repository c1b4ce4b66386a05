from __future__ import annotations

from typing import Any, MutableMapping, Optional

from ..core.enums import SessionKind
from .model import UserSession

_KIND_KEY = "session_kind"
_ACCOUNT_KEY = "account_id"


class SessionHolder:
    """Single active session slot over a mutable mapping (Flask's ``session``).

    No token, no timeout: the slot lives until logout or until the cookie
    goes away.
    """

    def __init__(self, storage: MutableMapping[str, Any]):
        self._storage = storage

    def login(self, user_session: UserSession) -> None:
        self._storage.clear()
        self._storage[_KIND_KEY] = user_session.kind.value
        self._storage[_ACCOUNT_KEY] = user_session.account_id

    def logout(self) -> None:
        self._storage.clear()

    def current(self) -> Optional[UserSession]:
        kind = self._storage.get(_KIND_KEY)
        account_id = self._storage.get(_ACCOUNT_KEY)
        if not kind or account_id is None:
            return None
        try:
            return UserSession(kind=SessionKind(kind), account_id=str(account_id))
        except ValueError:
            return None

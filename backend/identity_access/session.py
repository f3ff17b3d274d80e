"""
Session guard over client-held storage.

Why: The browser is the only place the session lives. This module wraps the
two persisted entries (authenticated flag, role) in a tiny state-transition
API so views never touch raw keys.

Design:
    `SessionGuard` is framework-agnostic. It works on anything implementing
    `ClientStorage` (get/set/remove). The web layer provides a cookie-backed
    adapter; tests and scripts use `MemoryStorage`.

Invariant:
    A reader never sees `authenticated=True` without an allowed role. Commit
    drops the flag before rewriting the role, and check treats a flag without
    a valid role as unauthenticated.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from .domain import (
    SESSION_FLAG_KEY,
    SESSION_FLAG_TRUE,
    SESSION_ROLE_KEY,
    is_allowed_role,
)


@dataclass(frozen=True)
class SessionState:
    authenticated: bool
    role: Optional[str] = None


UNAUTHENTICATED = SessionState(authenticated=False, role=None)


class ClientStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage used outside HTTP (tests, scripts)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class SessionGuard:
    def __init__(self, storage: ClientStorage):
        self.storage = storage

    def check_session(self) -> SessionState:
        """Return the persisted session, or the unauthenticated state."""
        if self.storage.get(SESSION_FLAG_KEY) != SESSION_FLAG_TRUE:
            return UNAUTHENTICATED
        role = self.storage.get(SESSION_ROLE_KEY)
        if not is_allowed_role(role):
            return UNAUTHENTICATED
        return SessionState(authenticated=True, role=role)

    def commit_session(self, role: str) -> None:
        """Persist `authenticated=True` together with `role`."""
        if not is_allowed_role(role):
            raise ValueError(f"unknown role: {role!r}")
        self.storage.remove(SESSION_FLAG_KEY)
        self.storage.set(SESSION_ROLE_KEY, role)
        self.storage.set(SESSION_FLAG_KEY, SESSION_FLAG_TRUE)

    def clear_session(self) -> None:
        """Remove both entries; flag first so no half-cleared session reads as valid."""
        self.storage.remove(SESSION_FLAG_KEY)
        self.storage.remove(SESSION_ROLE_KEY)


__all__ = [
    "SessionState",
    "UNAUTHENTICATED",
    "ClientStorage",
    "MemoryStorage",
    "SessionGuard",
]

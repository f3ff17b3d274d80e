"""
Route guard for protected views.

Why:
    Every protected page must consult the session exactly once per activation
    and pick one of two renders (content or login entry point). Putting the
    decision in one helper keeps views from reading cookies on their own.

Behavior:
    `require_session()` builds a `SessionGuard` over the request cookies and
    returns a `GuardDecision`. Views keep the decision's `storage` when they
    need to write (login/logout) so staged cookies can be applied to the
    response. There is no cross-view cache: a page rendered before a logout
    stays as it was; the next activation sees the cleared state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from client_storage import CookieStorage
from identity_access.domain import ROLE_ADMIN
from identity_access.session import SessionGuard, SessionState

LOGIN_ENTRY_PATH = "/"


@dataclass(frozen=True)
class GuardDecision:
    state: SessionState
    guard: SessionGuard
    storage: CookieStorage

    @property
    def allowed(self) -> bool:
        return self.state.authenticated

    @property
    def role(self) -> Optional[str]:
        return self.state.role

    @property
    def is_admin(self) -> bool:
        return self.state.role == ROLE_ADMIN


def session_guard_for(request: Request, *, environment: str = "dev") -> tuple[SessionGuard, CookieStorage]:
    storage = CookieStorage.from_request(request, environment=environment)
    return SessionGuard(storage), storage


def require_session(request: Request, *, environment: str = "dev") -> GuardDecision:
    guard, storage = session_guard_for(request, environment=environment)
    state = guard.check_session()
    # Expose minimal, read-only session context for downstream rendering.
    request.state.session = state
    return GuardDecision(state=state, guard=guard, storage=storage)

"""
Cookie-backed client storage for the session guard.

Why:
    The session record lives in the browser. On the server we can only read
    what the browser sent (`request.cookies`) and tell it what to change
    (`Set-Cookie` on the response). This adapter hides both behind the
    `ClientStorage` protocol used by `SessionGuard`.

Behavior:
    - Reads consult staged writes first, then the request cookies, so a
      commit followed by a check within one request sees the new state.
    - Writes are applied to every response passed to `apply()`.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from fastapi import Request
from fastapi.responses import Response

from auth_utils import cookie_opts

_REMOVED = object()


class CookieStorage:
    def __init__(self, cookies: Mapping[str, str], *, environment: str = "dev"):
        self._cookies = dict(cookies)
        self._pending: Dict[str, object] = {}
        self._environment = environment

    @classmethod
    def from_request(cls, request: Request, *, environment: str = "dev") -> "CookieStorage":
        return cls(request.cookies, environment=environment)

    def get(self, key: str) -> Optional[str]:
        if key in self._pending:
            value = self._pending[key]
            return None if value is _REMOVED else value  # type: ignore[return-value]
        return self._cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self._pending[key] = value

    def remove(self, key: str) -> None:
        self._pending[key] = _REMOVED

    @property
    def has_pending_writes(self) -> bool:
        return bool(self._pending)

    def apply(self, response: Response) -> Response:
        """Emit staged writes as one Set-Cookie header per key."""
        opts = cookie_opts(self._environment)
        for key, value in self._pending.items():
            if value is _REMOVED:
                response.delete_cookie(
                    key,
                    path=opts["path"],
                    secure=opts["secure"],
                    httponly=opts["httponly"],
                    samesite=opts["samesite"],
                )
            else:
                response.set_cookie(
                    key=key,
                    value=str(value),
                    max_age=opts["max_age"],
                    path=opts["path"],
                    secure=opts["secure"],
                    httponly=opts["httponly"],
                    samesite=opts["samesite"],
                )
        return response

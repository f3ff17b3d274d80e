"""
Client side of the password check.

Why:
    The login page must go through the public verification endpoint, the same
    contract a browser script or an external tool would use, instead of
    calling the verifier directly. That keeps one source of truth for input
    validation and configuration errors.

Behavior:
    - One POST per call, never retried. Callers report failures to the user
      for manual resubmission.
    - Any transport error, non-2xx status or malformed body becomes a
      `NetworkError`; callers must not commit a session in that case.
"""
from __future__ import annotations

from typing import Any, Callable, Optional
import logging

import httpx

from identity_access.domain import is_allowed_role
from identity_access.verifier import VerificationResult

logger = logging.getLogger("toolkit.web")

VERIFY_PATH = "/api/verify-password"


class NetworkError(Exception):
    """Raised when the verification round trip fails for any reason."""

    def __init__(self, code: str, status_code: Optional[int] = None):
        super().__init__(code)
        self.code = code
        self.status_code = status_code


def _parse_result(body: Any) -> VerificationResult:
    if not isinstance(body, dict) or not isinstance(body.get("isValid"), bool):
        raise NetworkError("malformed_response")
    role = body.get("role")
    if body["isValid"] and not is_allowed_role(role):
        raise NetworkError("malformed_response")
    return VerificationResult(is_valid=body["isValid"], role=role if body["isValid"] else None)


class VerificationClient:
    def __init__(self, client_factory: Callable[[], httpx.AsyncClient]):
        self._client_factory = client_factory

    async def verify(self, password: str, role: str) -> VerificationResult:
        try:
            async with self._client_factory() as client:
                r = await client.post(VERIFY_PATH, json={"password": password, "role": role})
        except httpx.HTTPError as exc:
            logger.warning("Password verification request failed: %s", exc.__class__.__name__)
            raise NetworkError("request_failed") from exc
        if r.status_code != 200:
            logger.warning("Password verification returned status %s", r.status_code)
            raise NetworkError("bad_status", status_code=r.status_code)
        try:
            body = r.json()
        except ValueError as exc:
            raise NetworkError("malformed_response") from exc
        return _parse_result(body)


__all__ = ["NetworkError", "VerificationClient", "VERIFY_PATH"]

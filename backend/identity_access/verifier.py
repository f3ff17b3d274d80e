"""
Credential verifier for the toolkit password gate.

Why: Keep the credential check outside the web adapter so it can be unit
tested without HTTP and reused by non-web callers.

Behavior:
    Validates input in a fixed order (password, role, configuration) and then
    compares the submitted password with the configured secret for the role.
    The comparison is exact and case-sensitive; `hmac.compare_digest` gives the
    same answer as `==` without leaking timing information.

Security:
    No lockout or throttling. A failed check never reports the role, so the
    response on mismatch carries no more information than "wrong password".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
import hmac
import logging

from .credentials import ROLE_SECRET_ENV, CredentialConfig
from .domain import DEFAULT_ROLE, is_allowed_role
from .errors import ConfigurationError, ValidationError

logger = logging.getLogger("toolkit.identity_access")


@dataclass(frozen=True)
class VerificationResult:
    is_valid: bool
    role: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "role": self.role if self.is_valid else None}


def resolve_role(role: Optional[str]) -> str:
    """Apply the default role and reject anything outside the allowed set."""
    if role is None:
        return DEFAULT_ROLE
    if not is_allowed_role(role):
        raise ValidationError("invalid_role", "invalid role")
    return role


def verify_credentials(
    password: Optional[str],
    role: Optional[str],
    config: CredentialConfig,
) -> VerificationResult:
    """Check a password against the secret configured for `role`.

    Raises:
        ValidationError: password missing/empty, or role not allowed.
        ConfigurationError: no secret configured for the resolved role.
    """
    if not password:
        raise ValidationError("password_required", "password required")
    resolved = resolve_role(role)

    expected = config.secret_for(resolved)
    if not expected:
        env_var = ROLE_SECRET_ENV.get(resolved)
        logger.error("%s environment variable not set (role=%s)", env_var, resolved)
        raise ConfigurationError(resolved, env_var)

    # JSON may carry lone surrogates; keep them comparable instead of failing to encode
    is_valid = hmac.compare_digest(
        password.encode("utf-8", "surrogatepass"), expected.encode("utf-8", "surrogatepass")
    )
    return VerificationResult(is_valid=is_valid, role=resolved if is_valid else None)


__all__ = ["VerificationResult", "resolve_role", "verify_credentials"]

"""
Error taxonomy for credential verification.

`ValidationError` means the caller sent something unusable and can fix it
themselves (HTTP 4xx). `ConfigurationError` means the operator forgot to
configure a secret (HTTP 5xx). Both carry a stable `code` so the web adapter
can map them to responses without parsing messages.
"""
from __future__ import annotations


class CredentialError(Exception):
    """Base class for failures raised by the credential verifier."""

    def __init__(self, code: str, message: str | None = None):
        super().__init__(message or code)
        self.code = code
        self.message = message or code


class ValidationError(CredentialError):
    """Raised when the submitted password/role pair is malformed."""


class ConfigurationError(CredentialError):
    """Raised when no secret is configured for the requested role."""

    def __init__(self, role: str, env_var: str | None = None):
        super().__init__("not_configured", f"{role} access not configured")
        self.role = role
        self.env_var = env_var


__all__ = ["CredentialError", "ValidationError", "ConfigurationError"]

"""
Configuration and startup security checks for the AI Toolkit.

Why: The toolkit is often deployed by copying the boilerplate and editing an
`.env` file. This module provides a single guard that stops obviously unsafe
production deployments without burdening local development.

Permissions: The caller needs no special privileges. The function simply reads
environment variables and raises `SystemExit` on fatal misconfiguration.
"""
from __future__ import annotations

import logging
import os

from identity_access.credentials import ROLE_SECRET_ENV

logger = logging.getLogger("toolkit.web")

_PLACEHOLDER_PREFIXES = ("CHANGE_ME", "DUMMY_DO_NOT_USE")
_LOOPBACK_HOSTS = {"local", "localhost", "127.0.0.1", "::1"}


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def current_environment() -> str:
    return (os.getenv("TOOLKIT_ENV", "dev") or "dev").strip().lower()


def app_version() -> str:
    return (os.getenv("APP_VERSION", "") or "").strip() or "1.0.0"


def internal_base_url() -> str:
    """Base URL for SSR→API hops; `http://local` means in-process ASGI."""
    base = (os.getenv("TOOLKIT_INTERNAL_BASE_URL", "") or "").strip()
    return (base or "http://local").rstrip("/")


def ensure_secure_config_on_startup() -> None:
    """Fail fast on insecure production configuration.

    Checks (prod-like environments only):
    - A configured role secret must not be a known placeholder value.
    - The internal verification base URL must not use plain http towards a
      non-loopback host.

    Missing secrets are logged, never fatal: each role reports its own
    misconfiguration when someone tries to log in with it.
    """
    for role, var in ROLE_SECRET_ENV.items():
        if not (os.getenv(var, "") or "").strip():
            logger.warning("%s is not set; %s logins will fail with a configuration error", var, role)

    if not _is_prod_like(current_environment()):
        return  # dev/test remain permissive

    # 1) Placeholder secrets
    for var in ROLE_SECRET_ENV.values():
        value = (os.getenv(var, "") or "").strip()
        if value and value.upper().startswith(_PLACEHOLDER_PREFIXES):
            raise SystemExit(
                f"Refusing to start: {var} is a placeholder value in production."
            )

    # 2) Internal hop must not send passwords over plain http to another host
    base = internal_base_url()
    try:
        from urllib.parse import urlparse

        parsed = urlparse(base)
        host = (parsed.hostname or "").lower()
        scheme = (parsed.scheme or "").lower()
    except Exception:
        raise SystemExit("Refusing to start: invalid TOOLKIT_INTERNAL_BASE_URL value in production.")
    if scheme == "http" and host not in _LOOPBACK_HOSTS:
        raise SystemExit(
            "Refusing to start: TOOLKIT_INTERNAL_BASE_URL must use https for non-local hosts in production."
        )

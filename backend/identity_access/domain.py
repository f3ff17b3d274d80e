"""
Identity domain constants and simple helpers.

Why:
- Centralize allowed roles to avoid drift between the verifier, the session
  guard and the web layer.
- Keep the persisted session key names in one place; the browser holds them,
  so renaming one silently logs every user out.
"""

from __future__ import annotations

ROLE_USER = "user"
ROLE_ADMIN = "admin"

# Flat set, no hierarchy. Immutable to prevent accidental mutation.
ALLOWED_ROLES = frozenset({ROLE_USER, ROLE_ADMIN})
DEFAULT_ROLE = ROLE_USER

# Client-held session record (two key/value entries)
SESSION_FLAG_KEY = "ai_toolkit_authenticated"
SESSION_ROLE_KEY = "ai_toolkit_user_role"
SESSION_FLAG_TRUE = "true"


def is_allowed_role(value: object) -> bool:
    return isinstance(value, str) and value in ALLOWED_ROLES


__all__ = [
    "ROLE_USER",
    "ROLE_ADMIN",
    "ALLOWED_ROLES",
    "DEFAULT_ROLE",
    "SESSION_FLAG_KEY",
    "SESSION_ROLE_KEY",
    "SESSION_FLAG_TRUE",
    "is_allowed_role",
]

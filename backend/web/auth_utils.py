"""
Shared authentication utilities.

Why:
    Avoid duplicating environment-dependent cookie policy logic across modules
    (e.g., the cookie storage adapter and tests). Keeping a single helper
    improves consistency.

Design:
    The helper is framework-agnostic and pure: it accepts an environment string
    and returns the corresponding cookie flags. Callers decide where the
    environment comes from (e.g., settings object).
"""

from __future__ import annotations

# Browsers cap cookie lifetimes at 400 days; the session record has no expiry
# of its own, so use the ceiling.
CLIENT_STATE_MAX_AGE = 400 * 24 * 60 * 60


def cookie_opts(environment: str) -> dict:
    """Return hardened cookie flags (dev = prod).

    Returns a mapping with keys:
      - secure: True
      - httponly: True  # page scripts never need the session entries
      - samesite: "lax"  # keep the session on top-level navigations
      - path: "/"
      - max_age: CLIENT_STATE_MAX_AGE
    """
    return {
        "secure": True,
        "httponly": True,
        "samesite": "lax",
        "path": "/",
        "max_age": CLIENT_STATE_MAX_AGE,
    }

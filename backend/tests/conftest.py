"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend to avoid sandbox restrictions
that can affect the Trio backend (e.g., socketpair permission errors).
"""
import importlib
import sys
from pathlib import Path

import pytest

# Ensure modules in backend/ and backend/web are importable across tests
REPO_ROOT = Path(__file__).resolve().parents[2]
BACKEND_DIR = REPO_ROOT / "backend"
WEB_DIR = BACKEND_DIR / "web"
TESTS_DIR = BACKEND_DIR / "tests"
for p in (str(REPO_ROOT), str(BACKEND_DIR), str(WEB_DIR), str(TESTS_DIR)):
    if p not in sys.path:
        sys.path.insert(0, p)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolate_toolkit_env(monkeypatch: pytest.MonkeyPatch):
    """Start every test from an unconfigured, in-process dev setup.

    Why:
        The password gate reads its secrets once at import; a developer's
        shell may export APP_PASSWORD or point the internal hop at a real
        host. Tests must not depend on either.
    Behavior:
        - Clears the toolkit variables from the process environment.
        - Resets `main.app.state.credentials` to an empty configuration and
          restores the previous value afterwards.
        - Drops any environment override left on `main.SETTINGS`.
    """
    for var in ("APP_PASSWORD", "ADMIN_PASSWORD", "TOOLKIT_ENV", "TOOLKIT_INTERNAL_BASE_URL", "APP_VERSION"):
        monkeypatch.delenv(var, raising=False)

    from identity_access.credentials import CredentialConfig

    main = sys.modules.get("main")
    if main is None:
        main = importlib.import_module("main")
    previous = main.app.state.credentials
    main.app.state.credentials = CredentialConfig()
    main.SETTINGS.override_environment(None)
    yield
    main.app.state.credentials = previous
    main.SETTINGS.override_environment(None)

"""
Verification API contract tests.

Exercises POST /api/verify-password through the auth-only app slice so pages,
middleware and static files stay out of the way.
"""
from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport

REPO_ROOT = Path(__file__).resolve().parents[2]
WEB_DIR = REPO_ROOT / "backend" / "web"
if str(WEB_DIR) not in sys.path:
    sys.path.insert(0, str(WEB_DIR))
import main  # type: ignore

from identity_access.credentials import CredentialConfig

pytestmark = pytest.mark.anyio("asyncio")

SECRETS = {"user": "hunter2", "admin": "root-pw"}


def _app(**secrets: str):
    app = main.create_app_auth_only()
    app.state.credentials = CredentialConfig(secrets)
    return app


async def _post(app, **kwargs) -> httpx.Response:
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.post("/api/verify-password", **kwargs)


async def test_correct_user_password_without_role():
    r = await _post(_app(user="hunter2"), json={"password": "hunter2"})
    assert r.status_code == 200
    assert r.json() == {"isValid": True, "role": "user"}
    assert r.headers.get("Cache-Control") == "private, no-store"


@pytest.mark.parametrize("role", ["user", "admin"])
async def test_each_role_accepts_its_secret(role: str):
    r = await _post(_app(**SECRETS), json={"password": SECRETS[role], "role": role})
    assert r.status_code == 200
    assert r.json() == {"isValid": True, "role": role}


@pytest.mark.parametrize("role", ["user", "admin"])
async def test_each_role_rejects_secret_with_suffix(role: str):
    r = await _post(_app(**SECRETS), json={"password": SECRETS[role] + "x", "role": role})
    assert r.status_code == 200
    assert r.json() == {"isValid": False, "role": None}


async def test_wrong_password_is_200_with_null_role():
    r = await _post(_app(user="hunter2"), json={"password": "hunter3", "role": "user"})
    assert r.status_code == 200
    assert r.json() == {"isValid": False, "role": None}


async def test_lone_surrogate_password_is_a_mismatch_not_a_server_error():
    r = await _post(
        _app(user="hunter2"),
        content=b'{"password": "\\ud800"}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 200
    assert r.json() == {"isValid": False, "role": None}


async def test_missing_password_is_400():
    r = await _post(_app(user="hunter2"), json={})
    assert r.status_code == 400
    assert r.json() == {"error": "Password is required"}


async def test_empty_password_is_400():
    r = await _post(_app(user="hunter2"), json={"password": "", "role": "user"})
    assert r.status_code == 400
    assert r.json() == {"error": "Password is required"}


async def test_unknown_role_is_400():
    r = await _post(_app(user="hunter2"), json={"password": "x", "role": "superadmin"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid role specified"}


async def test_explicit_null_role_is_400():
    r = await _post(_app(user="hunter2"), json={"password": "hunter2", "role": None})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid role specified"}


@pytest.mark.parametrize("password", ["x", "hunter2"])
async def test_unconfigured_admin_is_500_whatever_the_password(password: str):
    r = await _post(_app(user="hunter2"), json={"password": password, "role": "admin"})
    assert r.status_code == 500
    assert r.json() == {"error": "Admin access not configured"}


async def test_unconfigured_user_is_500():
    r = await _post(_app(), json={"password": "x"})
    assert r.status_code == 500
    assert r.json() == {"error": "User access not configured"}


async def test_invalid_role_wins_over_missing_configuration():
    r = await _post(_app(), json={"password": "x", "role": "owner"})
    assert r.status_code == 400


async def test_malformed_json_is_400():
    r = await _post(
        _app(user="hunter2"),
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}


@pytest.mark.parametrize("body", [["hunter2"], "hunter2", {"password": 12345}])
async def test_non_object_or_non_string_body_is_400(body):
    r = await _post(_app(user="hunter2"), json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}


async def test_unexpected_error_is_generic_500(monkeypatch: pytest.MonkeyPatch):
    import routes.auth as auth_routes  # type: ignore

    def boom(*args, **kwargs):
        raise RuntimeError("database on fire")

    monkeypatch.setattr(auth_routes, "verify_credentials", boom)
    r = await _post(_app(user="hunter2"), json={"password": "hunter2"})
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}


async def test_full_app_reads_credentials_from_state(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(main.app.state, "credentials", CredentialConfig({"user": "hunter2"}))
    r = await _post(main.app, json={"password": "hunter2", "role": "user"})
    assert r.status_code == 200
    assert r.json() == {"isValid": True, "role": "user"}


async def test_get_is_not_allowed():
    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        r = await client.get("/api/verify-password")
    assert r.status_code == 405

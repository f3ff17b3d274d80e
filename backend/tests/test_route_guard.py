"""
Protected views render either their content or the login entry point,
decided once per request from the session cookies.
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

pytestmark = pytest.mark.anyio("asyncio")

FLAG = "ai_toolkit_authenticated"
ROLE = "ai_toolkit_user_role"


async def _get(path: str, cookie: str | None = None) -> httpx.Response:
    headers = {"Cookie": cookie} if cookie else {}
    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        return await client.get(path, headers=headers, follow_redirects=False)


async def test_home_with_user_session_shows_catalog():
    r = await _get("/", f"{FLAG}=true; {ROLE}=user")
    assert r.status_code == 200
    for heading in ("Data Tools", "Generate", "Analyze", "Automate"):
        assert heading in r.text
    assert 'href="/data-analysis"' in r.text
    assert "Launch Tool" in r.text
    assert "Coming Soon" in r.text
    assert ">Logout</button>" in r.text
    assert "Admin Settings" not in r.text
    assert "Secure Access Portal" not in r.text


async def test_home_with_admin_session_shows_admin_controls():
    r = await _get("/", f"{FLAG}=true; {ROLE}=admin")
    assert r.status_code == 200
    assert 'title="Admin Settings"' in r.text
    assert 'href="/admin"' in r.text
    assert ">Admin Logout</button>" in r.text


@pytest.mark.parametrize(
    "cookie",
    [
        None,
        f"{FLAG}=true",
        f"{ROLE}=admin",
        f"{FLAG}=false; {ROLE}=admin",
        f"{FLAG}=true; {ROLE}=superadmin",
    ],
)
async def test_home_without_valid_session_shows_login(cookie):
    r = await _get("/", cookie)
    assert r.status_code == 200
    assert "Secure Access Portal" in r.text
    assert "Data Tools" not in r.text


async def test_check_does_not_write_cookies():
    r = await _get("/", f"{FLAG}=true; {ROLE}=user")
    assert r.headers.get_list("set-cookie") == []


async def test_tool_page_requires_session():
    r = await _get("/data-analysis")
    assert r.status_code == 200
    assert "Authentication Required" in r.text
    assert "Please log in to access this tool." in r.text
    assert 'href="/"' in r.text
    assert "Data Analysis Tool" not in r.text


async def test_tool_page_renders_for_session():
    r = await _get("/data-analysis", f"{FLAG}=true; {ROLE}=user")
    assert r.status_code == 200
    assert "Data Analysis Tool" in r.text
    assert "Upload Data" in r.text
    assert "Analysis Options" in r.text
    assert "Back to Toolkit" in r.text
    assert r.headers.get("Cache-Control") == "private, no-store"


async def test_pages_carry_security_headers():
    r = await _get("/")
    csp = r.headers.get("Content-Security-Policy", "")
    assert "default-src 'self'" in csp
    assert r.headers.get("X-Frame-Options") == "SAMEORIGIN"
    assert r.headers.get("X-Content-Type-Options") == "nosniff"


async def test_static_stylesheet_is_served():
    r = await _get("/static/css/toolkit.css")
    assert r.status_code == 200
    assert "text/css" in r.headers.get("content-type", "")

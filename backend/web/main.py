"AI Toolkit web shell"
from __future__ import annotations

from pathlib import Path
import os
import logging

import httpx
from httpx import ASGITransport
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# Component Imports
from components import Layout, LoginForm
from components.pages import AuthRequiredPage, DataAnalysisPage, NotFoundPage, ToolkitHomePage

# Identity Imports
from identity_access.credentials import load_credential_config
from identity_access.domain import DEFAULT_ROLE, is_allowed_role
from identity_access.verifier import VerificationResult
import sys as _sys

import config as _cfg
from guard import LOGIN_ENTRY_PATH, GuardDecision, require_session, session_guard_for
from tool_catalog import TOOL_GROUPS, live_tools
from verification_client import NetworkError, VerificationClient

# Ensure imports under both names reference the same module instance.
if __name__ == "main":
    _sys.modules.setdefault("backend.web.main", _sys.modules[__name__])
elif __name__ == "backend.web.main":
    _sys.modules["main"] = _sys.modules[__name__]


def _should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via TOOLKIT_ENABLE_DOTENV (default true outside
      pytest).
    """
    if "pytest" in _sys.modules or os.getenv("PYTEST_CURRENT_TEST"):
        return False
    flag = (os.getenv("TOOLKIT_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


if _should_load_dotenv():
    load_dotenv()

# Minimal production safety checks (fail-fast on insecure config)
_cfg.ensure_secure_config_on_startup()

# --- App & Settings Setup -------------------------------------------------------

class AuthSettings:
    def __init__(self) -> None:
        self._env_override: str | None = None

    @property
    def environment(self) -> str:
        if self._env_override is not None:
            return self._env_override
        return _cfg.current_environment()

    def override_environment(self, env: str | None) -> None:
        """Override environment for tests (e.g., "prod"), or reset with None."""
        self._env_override = env

logger = logging.getLogger("toolkit.web")
SETTINGS = AuthSettings()

MSG_INCORRECT_PASSWORD = "Incorrect password. Please try again."
MSG_VERIFY_FAILED = "Error verifying password. Please try again."

app = FastAPI(title="AI Toolkit", description="AI-powered application toolkit", version=_cfg.app_version())

# Read once at startup; tests replace app.state.credentials per case.
app.state.credentials = load_credential_config()

# --- Static Files & Routers -----------------------------------------------------

static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

from routes.auth import auth_router
from routes.operations import operations_router

app.include_router(auth_router)
app.include_router(operations_router)

# --- Security Headers Middleware ----------------------------------------------

@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    # No inline scripts or styles anywhere in the shell.
    csp = (
        "default-src 'self'; script-src 'self'; style-src 'self'; "
        "img-src 'self' data:; font-src 'self' data:; connect-src 'self'; form-action 'self';"
    )
    response.headers.setdefault("Content-Security-Policy", csp)
    response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
    if SETTINGS.environment == "prod":
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
    response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
    # HSTS: always on (dev = prod)
    response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
    return response

# --- Verification Client ---------------------------------------------------------

def _internal_api_client() -> httpx.AsyncClient:
    """Create the client used by the login form to reach /api/verify-password.

    The default base `http://local` keeps the hop in-process via
    ASGITransport. Any other TOOLKIT_INTERNAL_BASE_URL sends a real HTTP
    request to that host (e.g., a separately deployed API).
    """
    base = _cfg.internal_base_url()
    if base == "http://local":
        return httpx.AsyncClient(transport=ASGITransport(app=app), base_url=base)
    return httpx.AsyncClient(base_url=base, timeout=10.0)


def _verification_client() -> VerificationClient:
    # Resolve the factory at call time so tests can monkeypatch it.
    return VerificationClient(lambda: _internal_api_client())

# --- Rendering Helpers ------------------------------------------------------------

def _layout_response(
    request: Request,
    layout: Layout,
    *,
    status_code: int = 200,
    decision: GuardDecision | None = None,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    """Render Layout and return an HTMLResponse.

    Behavior:
        - Every page depends on the viewer's session, so responses are
          `private, no-store` unless the caller overrides Cache-Control.
        - Staged cookie writes of `decision.storage` are applied.
    """
    response = HTMLResponse(content=layout.render(), status_code=status_code)
    response.headers["Cache-Control"] = "private, no-store"
    if headers:
        for key, value in headers.items():
            response.headers[key] = value
    if decision is not None and decision.storage.has_pending_writes:
        decision.storage.apply(response)
    return response


def _login_page(request: Request, *, role: str | None = None, error: str | None = None, status_code: int = 200) -> HTMLResponse:
    content = f'<div class="container container--narrow">{LoginForm(role=role, error=error).render()}</div>'
    layout = Layout(title="Login", content=content, role=None, show_header=False, current_path=request.url.path)
    return _layout_response(request, layout, status_code=status_code)

# --- Route Handlers -------------------------------------------------------------

@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Landing page and login entry point.

    Behavior:
        - Without a session: renders the login form in place.
        - With a session: renders the tool catalog with a role-aware header.
    """
    decision = require_session(request, environment=SETTINGS.environment)
    if not decision.allowed:
        return _login_page(request)
    content = ToolkitHomePage(TOOL_GROUPS).render()
    layout = Layout(title="Home", content=content, role=decision.role, current_path=request.url.path)
    return _layout_response(request, layout, decision=decision)


@app.post("/auth/login", response_class=HTMLResponse)
async def auth_login_submit(request: Request):
    """Handle the login form via the verification API.

    Why:
        The page goes through POST /api/verify-password like any other client
        instead of calling the verifier directly, so there is one contract.

    Behavior:
        - Valid password: commits the session (both cookies) and redirects
          303 to "/".
        - Wrong password: re-renders the form with an error, password empty.
        - Any verification failure (transport, non-200, malformed body):
          re-renders with a generic retry message. No cookies are written.
    """
    form = await request.form()
    password = str(form.get("password") or "")
    submitted_role = str(form.get("role") or DEFAULT_ROLE)
    keep_role = submitted_role if is_allowed_role(submitted_role) else DEFAULT_ROLE
    logger.info("Submitting credentials (role=%s)", keep_role)

    try:
        result: VerificationResult = await _verification_client().verify(password, submitted_role)
    except NetworkError as exc:
        logger.warning("Password verification error: %s", exc.code)
        return _login_page(request, role=keep_role, error=MSG_VERIFY_FAILED)

    if not (result.is_valid and result.role):
        return _login_page(request, role=keep_role, error=MSG_INCORRECT_PASSWORD)

    guard, storage = session_guard_for(request, environment=SETTINGS.environment)
    guard.commit_session(result.role)
    resp = RedirectResponse(url=LOGIN_ENTRY_PATH, status_code=303)
    resp.headers["Cache-Control"] = "private, no-store"
    storage.apply(resp)
    return resp


@app.api_route("/auth/logout", methods=["GET", "POST"])
async def auth_logout(request: Request):
    """Clear the client-held session and return to the login entry point."""
    guard, storage = session_guard_for(request, environment=SETTINGS.environment)
    guard.clear_session()
    resp = RedirectResponse(url=LOGIN_ENTRY_PATH, status_code=303)
    resp.headers["Cache-Control"] = "private, no-store"
    storage.apply(resp)
    return resp


@app.get("/data-analysis", response_class=HTMLResponse)
async def data_analysis_page(request: Request):
    decision = require_session(request, environment=SETTINGS.environment)
    if not decision.allowed:
        layout = Layout(
            title="Authentication Required",
            content=AuthRequiredPage(login_href=LOGIN_ENTRY_PATH).render(),
            role=None,
            show_header=False,
            current_path=request.url.path,
        )
        return _layout_response(request, layout, decision=decision)
    layout = Layout(title="Data Analysis", content=DataAnalysisPage().render(), role=decision.role, current_path=request.url.path)
    return _layout_response(request, layout, decision=decision)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    if request.url.path.startswith("/api/"):
        return JSONResponse({"error": "not_found"}, status_code=404, headers={"Cache-Control": "private, no-store"})
    decision = require_session(request, environment=SETTINGS.environment)
    content = NotFoundPage(authenticated=decision.allowed, tools=live_tools() if decision.allowed else ()).render()
    layout = Layout(title="Page Not Found", content=content, role=decision.role, current_path=request.url.path)
    return _layout_response(request, layout, status_code=404, decision=decision)


def create_app_auth_only() -> FastAPI:
    """Factory returning a lightweight FastAPI app exposing only the verification API.

    Why: Tests import this to exercise the verification contract in isolation
    without pages, middleware or static files.
    """
    sub = FastAPI(title="AI Toolkit (auth-only)", description="Auth slice", version=_cfg.app_version())
    sub.state.credentials = load_credential_config()
    sub.include_router(auth_router)
    return sub

"""
Credential verification API (router-only module).

Why:
    Keep the JSON endpoint in a dedicated router so the full app and the slim
    auth-only test app share one implementation.

Notes:
    - The credential configuration is read from `request.app.state.credentials`
      (set once at startup in `main.py`); tests replace it per app instance.
    - Validation and configuration errors never escape as exceptions: they
      are mapped to structured JSON here.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PayloadValidationError

from identity_access.credentials import CredentialConfig, load_credential_config
from identity_access.errors import ConfigurationError, ValidationError
from identity_access.verifier import verify_credentials


auth_router = APIRouter(tags=["Auth"])  # explicit paths, no prefix
logger = logging.getLogger("toolkit.web.auth")

_NO_STORE = {"Cache-Control": "private, no-store"}


class VerifyPasswordPayload(BaseModel):
    # Accept raw values (including empty) and validate in the verifier to return 400
    password: str | None = None
    role: str | None = None


def _error(message: str, *, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=_NO_STORE)


def _credentials_for(request: Request) -> CredentialConfig:
    cfg = getattr(request.app.state, "credentials", None)
    if cfg is None:
        cfg = load_credential_config()
        request.app.state.credentials = cfg
    return cfg


@auth_router.post("/api/verify-password")
async def verify_password(request: Request):
    """
    Check a password + role pair against the configured secrets.

    Behavior:
        - 200 `{isValid, role}`; `role` is null whenever `isValid` is false.
        - 400 `{error}` for a missing/empty password, an unknown role, or a
          body that is not a JSON object with string fields.
        - 500 `{error}` when no secret is configured for the requested role.
        - Omitted `role` defaults to "user"; an explicit null is rejected.
    Permissions:
        Public. No throttling.
    """
    try:
        body = await request.json()
    except ValueError:
        return _error("Invalid request body", status_code=400)
    if not isinstance(body, dict):
        return _error("Invalid request body", status_code=400)
    try:
        payload = VerifyPasswordPayload.model_validate(body)
    except PayloadValidationError:
        return _error("Invalid request body", status_code=400)

    role = payload.role
    if role is None and "role" in payload.model_fields_set:
        return _error("Invalid role specified", status_code=400)

    try:
        result = verify_credentials(payload.password, role, _credentials_for(request))
    except ValidationError as exc:
        if exc.code == "password_required":
            return _error("Password is required", status_code=400)
        return _error("Invalid role specified", status_code=400)
    except ConfigurationError as exc:
        # The verifier already logged the missing variable
        return _error(f"{exc.role.capitalize()} access not configured", status_code=500)
    except Exception as exc:
        logger.exception("Error verifying password: %s", exc.__class__.__name__)
        return _error("Internal server error", status_code=500)

    return JSONResponse(result.to_dict(), headers=_NO_STORE)

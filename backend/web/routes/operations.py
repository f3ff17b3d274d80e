"""Operations endpoints (health probes for orchestrators and monitoring)."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse

import config as app_config

operations_router = APIRouter(tags=["Operations"])
logger = logging.getLogger("toolkit.web")

# Process start, used for uptime reporting
_STARTED_AT = time.monotonic()


def _private_response(body: dict, *, status_code: int = 200) -> JSONResponse:
    return JSONResponse(body, status_code=status_code, headers={"Cache-Control": "private, no-store"})


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@operations_router.get("/health")
async def health_check():
    # Minimal liveness endpoint used by orchestrators and tests.
    return _private_response({"status": "healthy"})


@operations_router.get("/api/health-check")
async def health_check_details():
    """
    Return basic runtime information.

    Behavior:
        - 200 `{status, timestamp, version, environment, uptime}`; uptime is
          in seconds since process start.
        - 500 `{status: "unhealthy", timestamp, error}` if collecting the
          information fails.
    Permissions:
        Public.
    """
    try:
        return _private_response({
            "status": "healthy",
            "timestamp": _now_iso(),
            "version": app_config.app_version(),
            "environment": app_config.current_environment(),
            "uptime": round(time.monotonic() - _STARTED_AT, 3),
        })
    except Exception as exc:
        logger.error("Health check error: %s", exc.__class__.__name__)
        return _private_response(
            {"status": "unhealthy", "timestamp": _now_iso(), "error": "Internal server error"},
            status_code=500,
        )

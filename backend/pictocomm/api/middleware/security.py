from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.types import ASGIApp

logger = get_logger(__name__)


class SecurityMiddleware(BaseHTTPMiddleware):
    """Add security headers and log board events with their latency."""

    def __init__(self, app: ASGIApp, api_prefix: str = "/api/v1"):
        super().__init__(app)
        self._sessions_path = f"{api_prefix}/sessions"

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"

        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = "max-age=15552000; includeSubDomains"

        # Board state changes on every event; never serve it from a cache
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"

        if request.method == "POST" and request.url.path.startswith(self._sessions_path):
            logger.debug(
                "Board event handled",
                extra={
                    "path": request.url.path,
                    "status": response.status_code,
                    "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
                }
            )

        return response

"""
AvatarAPI - Logging Middleware
==============================

Request/response logging for API monitoring.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.core import log


# =============================================================================
# Logging Middleware
# =============================================================================

class LoggingMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for request/response logging.

    Features:
    - Request ID generation and tracking
    - Request timing
    - Error logging
    - Log level chosen by status code
    """

    # Path prefixes to skip (browser and crawler noise)
    SKIP_PREFIXES = (
        "/favicon.ico",
        "/robots.txt",
        "/.well-known",
    )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path.startswith(self.SKIP_PREFIXES):
            return await call_next(request)

        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()
        method = request.method
        client_ip = self._get_client_ip(request)

        log.debug("API Request", [
            ("ID", request_id),
            ("Method", method),
            ("Path", path[:50]),
            ("IP", client_ip),
            ("Origin", request.headers.get("origin", "none")[:50]),
        ])

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            log.error("API Error", [
                ("ID", request_id),
                ("Method", method),
                ("Path", path[:50]),
                ("Error", str(e)[:50]),
                ("Duration", f"{duration_ms:.0f}ms"),
            ])
            raise

        duration_ms = (time.time() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id

        status = response.status_code
        log_data = [
            ("ID", request_id),
            ("Method", method),
            ("Path", path[:50]),
            ("Status", str(status)),
            ("Duration", f"{duration_ms:.0f}ms"),
        ]

        if status >= 500:
            log.error("API Response", log_data)
        elif status in (400, 405):
            # Usually rejected preflights or wrong methods
            log.warning("API Response", log_data)
        else:
            log.debug("API Response", log_data)

        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP, considering proxies."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host
        return "unknown"


__all__ = ["LoggingMiddleware"]

"""
QuickNotes Backend — Request Logging Middleware
=================================================

What:  One access log line per HTTP request with status and duration.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Log line:
    DELETE /api/notes/7 200 3.2ms [1a2b3c4d] from 127.0.0.1

The same fields are attached as `extra` for structured handlers.
Request bodies (note text) are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quicknotes.middleware.request_id import request_id_var

logger = logging.getLogger("quicknotes.access")

# Probed every few seconds by orchestrators
SILENT_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status, duration, request ID and client IP.

    Level follows the status code: 5xx → ERROR, 4xx → WARNING, else INFO.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SILENT_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

"""
QuickNotes Backend — Request ID Middleware
============================================

What:  Assigns a correlation ID to each request and returns it in X-Request-ID.
How:   Reuses a client-supplied X-Request-ID when present, otherwise generates a
       short UUID; stores it in a ContextVar so loggers and exception handlers
       can read it without access to the request object.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Longer client-supplied values are replaced to keep log lines bounded
MAX_REQUEST_ID_LENGTH = 64


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets request_id_var and request.state.request_id; echoes the ID in the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID", "")
        if not rid or len(rid) > MAX_REQUEST_ID_LENGTH:
            # 8 chars is plenty for correlating log lines
            rid = str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

"""
Survey API Backend: Request ID Middleware
============================================

What:  Assigns a short correlation id to each request and echoes it back.
Why:   Every log line and every error body for one request share the same id,
       so a client can quote it when reporting a problem.
How:   Uses the client's X-Request-ID header when present, otherwise an
       8-character slice of a fresh UUID. Stored in a ContextVar for loggers
       and exception handlers, and in request.state for route handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

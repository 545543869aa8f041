"""
Survey API Backend: Request Logging Middleware
=================================================

What:  One access log line per HTTP request: method, path, status, duration.
Why:   Failures are otherwise only visible in the process console; this makes
       every request traceable there by its request id.
How:   Times the downstream call and logs at a level chosen by status class.

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (passwords, emails, survey answers)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from survey_api.middleware.request_id import request_id_var

logger = logging.getLogger("survey_api.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per HTTP request once the response is ready.

    Level by status:
        5xx → ERROR, 4xx → WARNING, everything else → INFO

    /health is skipped; probes hit it every few seconds.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path == "/health":
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            request.client.host if request.client else "unknown",
        )

        return response

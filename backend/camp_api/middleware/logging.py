"""
Camp API Backend: Request Logging Middleware
=============================================

What:  One access log line per HTTP request.
How:   Measures handler duration and logs method, path, status, request ID
       and client IP on the `camp_api.access` logger.

Severity by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

What we log vs what we don't:
    Log:        method, path, status, duration, IP, request ID
    Don't log:  query strings, headers, bodies
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from camp_api.middleware.request_id import request_id_var

logger = logging.getLogger("camp_api.access")

# Probed every few seconds by orchestrators; not worth a log line each
_QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in _QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response

"""
QuanThink Backend: Request Logging Middleware
==============================================

What:  One access-log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration
       and request ID. Level follows the status class: 5xx ERROR,
       4xx WARNING, everything else INFO.

Never logged: request bodies (they contain passwords) and headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quanthink.middleware.request_id import request_id_var

logger = logging.getLogger("quanthink.access")

# Polled every few seconds by infrastructure
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method

        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are answered by the outermost server-error
            # handler; record them here as the 500 the client receives
            self._log_access(method, path, 500, start_time, client_ip)
            raise

        self._log_access(method, path, response.status_code, start_time, client_ip)
        return response

    def _log_access(
        self, method: str, path: str, status: int, start_time: float, client_ip: str
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

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

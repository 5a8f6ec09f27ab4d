"""Request logging middleware — one log line per handled request."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("atla.access")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration.

    Writes and failures log at INFO / WARNING; plain reads log at DEBUG so
    list traffic does not drown the log in production.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if response.status_code >= 500:
            level = logging.WARNING
        elif request.method in _WRITE_METHODS or response.status_code >= 400:
            level = logging.INFO
        else:
            level = logging.DEBUG

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.log(
            level, "%s %s -> %d (%dms)",
            request.method, path, response.status_code, duration_ms,
        )
        return response

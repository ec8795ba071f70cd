"""Request logging middleware, one line per request with status and latency."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("courier_api.requests")

# Methods that mutate state are logged at INFO, reads at DEBUG
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request after its response is produced.

    Requests that raise past the exception handlers are logged with their
    traceback and re-raised unchanged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.monotonic() - start) * 1000)
            logger.exception(
                "%s %s -> unhandled error (%dms)",
                request.method, request.url.path, duration_ms,
            )
            raise
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.INFO if request.method in _WRITE_METHODS else logging.DEBUG
        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        logger.log(
            level,
            "%s %s -> %d (%dms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response

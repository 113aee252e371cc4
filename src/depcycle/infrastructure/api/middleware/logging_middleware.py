"""Access logging middleware.

Emits one structured event per request once the response is known. The
correlation id is already bound by the error handler middleware.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from depcycle.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

# Health probes and metric scrapes log at DEBUG
QUIET_PATHS = frozenset({"/api/v1/health", "/api/v1/metrics"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, duration, and client for each request.

    Successful requests log at INFO, client errors at WARNING, and server
    errors at ERROR.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        start_time = time.perf_counter()
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": _client_ip(request),
        }

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "HTTP request failed",
                duration_ms=_elapsed_ms(start_time),
                exc_info=True,
                **fields,
            )
            raise

        status_code = response.status_code
        if status_code >= 500:
            log = logger.error
        elif status_code >= 400:
            log = logger.warning
        elif request.url.path in QUIET_PATHS:
            log = logger.debug
        else:
            log = logger.info

        log(
            "HTTP request completed",
            status_code=status_code,
            duration_ms=_elapsed_ms(start_time),
            **fields,
        )
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def _client_ip(request: Request) -> str:
    """Extract the client address, preferring the first X-Forwarded-For hop."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"

"""Metrics middleware for recording HTTP request metrics.

Records Prometheus metrics for all HTTP requests including duration,
status codes, and endpoints.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from depcycle.infrastructure.observability.metrics import record_http_request


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to record HTTP request metrics.

    Labels: method, endpoint, status_code. The endpoint is the matched route
    template, so unknown paths collapse into a single label value.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        record_http_request(
            method=request.method,
            endpoint=self._normalize_endpoint(request),
            status_code=response.status_code,
            duration=time.perf_counter() - start_time,
        )

        return response

    def _normalize_endpoint(self, request: Request) -> str:
        """Use the matched route template when FastAPI resolved one."""
        route = request.scope.get("route")
        if route is not None and hasattr(route, "path"):
            return route.path

        return "unmatched"

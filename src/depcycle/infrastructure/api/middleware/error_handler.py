"""Global error handling middleware.

Converts uncaught exceptions to RFC 7807 Problem Details format for consistent
error responses. Includes correlation IDs for request tracing.
"""

import uuid

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from depcycle.application.use_cases.analyze_dependency_cycles import (
    GraphTooLargeError,
)
from depcycle.infrastructure.api.schemas.error_schema import (
    ProblemDetails,
    status_text,
)
from depcycle.infrastructure.observability.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware to handle all exceptions and return RFC 7807 Problem Details."""

    async def dispatch(self, request: Request, call_next):
        """Catch all exceptions and convert to Problem Details format.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response with Problem Details format on error
        """
        # Honor an upstream correlation ID
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        clear_request_context()
        bind_request_context(correlation_id=correlation_id)

        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        except Exception as exc:
            logger.error(
                "Request failed",
                path=request.url.path,
                method=request.method,
                exc_info=exc,
            )

            problem = exception_to_problem(exc, request.url.path, correlation_id)
            return problem_response(problem)


def exception_to_problem(
    exc: Exception, instance: str, correlation_id: str
) -> ProblemDetails:
    """Convert an exception to RFC 7807 Problem Details.

    Args:
        exc: Exception that was raised
        instance: Request path that caused the exception
        correlation_id: Correlation ID for tracing

    Returns:
        ProblemDetails object
    """
    if isinstance(exc, HTTPException):
        return ProblemDetails(
            type="about:blank",
            title=status_text(exc.status_code),
            status=exc.status_code,
            detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
            instance=instance,
            correlation_id=correlation_id,
        )

    # Checked before ValueError: GraphTooLargeError subclasses it
    if isinstance(exc, GraphTooLargeError):
        return ProblemDetails(
            type="https://depcycle.internal/errors/graph-too-large",
            title=status_text(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE),
            status=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(exc),
            instance=instance,
            correlation_id=correlation_id,
            node_count=exc.node_count,
            edge_count=exc.edge_count,
        )

    if isinstance(exc, ValueError):
        return ProblemDetails(
            type="https://httpstatuses.com/400",
            title=status_text(status.HTTP_400_BAD_REQUEST),
            status=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
            instance=instance,
            correlation_id=correlation_id,
        )

    return ProblemDetails(
        type="https://httpstatuses.com/500",
        title=status_text(status.HTTP_500_INTERNAL_SERVER_ERROR),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
        instance=instance,
        correlation_id=correlation_id,
    )


def problem_response(problem: ProblemDetails) -> JSONResponse:
    """Create JSONResponse from ProblemDetails.

    Args:
        problem: Problem Details object

    Returns:
        JSONResponse with appropriate status code and headers
    """
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        headers={
            "Content-Type": "application/problem+json",
            CORRELATION_HEADER: problem.correlation_id or "",
        },
    )

"""
FastAPI application entry point.

Implements the API layer of the Infrastructure following Clean Architecture.
This module sets up the FastAPI app, registers routes, middleware, and exception handlers.
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from depcycle import __version__
from depcycle.application.use_cases.analyze_dependency_cycles import (
    GraphTooLargeError,
)
from depcycle.infrastructure.api.middleware.error_handler import (
    exception_to_problem,
    problem_response,
)
from depcycle.infrastructure.api.schemas.error_schema import (
    ProblemDetails,
    status_text,
)
from depcycle.infrastructure.observability import (
    configure_logging,
    instrument_fastapi_app,
    setup_tracing,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Startup:
    - Configure observability (logging, tracing)
    - Instrument FastAPI with OpenTelemetry when tracing is enabled

    Shutdown:
    - Flush pending spans
    """
    configure_logging()
    provider = setup_tracing()
    if provider is not None:
        instrument_fastapi_app(app)

    yield

    if provider is not None:
        provider.shutdown()


def _correlation_id(request: Request) -> str:
    return getattr(request.state, "correlation_id", None) or str(uuid.uuid4())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Dependency Cycle Engine API",
        description=(
            "Detects elementary cycles in project and class dependency graphs "
            "and ranks the nodes involved as hotspots and breakpoints."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware (should be first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # Cannot use credentials with wildcard origins
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware (order matters: last added = first executed)
    from .middleware.error_handler import ErrorHandlerMiddleware
    from .middleware.logging_middleware import LoggingMiddleware
    from .middleware.metrics_middleware import MetricsMiddleware

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)  # Outermost: catches all errors

    # Register routes
    from .routes import cycles, health

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(
        cycles.router, prefix="/api/v1/cycles", tags=["Dependency Cycles"]
    )

    # Exception handlers for RFC 7807 format
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Convert HTTPException to RFC 7807 Problem Details."""
        problem = exception_to_problem(
            exc, request.url.path, _correlation_id(request)
        )
        return problem_response(problem)

    @app.exception_handler(GraphTooLargeError)
    async def graph_too_large_handler(request: Request, exc: GraphTooLargeError):
        """Convert oversized graphs to 413 Problem Details."""
        problem = exception_to_problem(
            exc, request.url.path, _correlation_id(request)
        )
        return problem_response(problem)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Convert Pydantic validation errors to RFC 7807 Problem Details."""
        problem = ProblemDetails(
            type="about:blank",
            title=status_text(status.HTTP_422_UNPROCESSABLE_ENTITY),
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Validation failed: {exc.errors()}",
            instance=request.url.path,
            correlation_id=_correlation_id(request),
        )
        return problem_response(problem)

    @app.get("/", status_code=status.HTTP_200_OK)
    async def root():
        """Root endpoint - API information."""
        return {
            "name": "Dependency Cycle Engine API",
            "version": __version__,
            "status": "operational",
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()

"""
Health check endpoints.

Provides the liveness probe and the Prometheus metrics endpoint.
"""

from fastapi import APIRouter, Response, status

from depcycle import __version__
from depcycle.infrastructure.observability.metrics import get_metrics_content

router = APIRouter()


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Check if the service is alive",
    tags=["Health"],
)
async def liveness() -> dict:
    """
    Liveness probe - check if the process is running.

    The engine has no external dependencies, so liveness is also readiness.
    """
    return {
        "status": "healthy",
        "service": "depcycle-engine",
        "version": __version__,
    }


@router.get(
    "/metrics",
    status_code=status.HTTP_200_OK,
    summary="Prometheus metrics",
    description="Export Prometheus metrics in exposition format",
    tags=["Observability"],
    response_class=Response,
)
async def metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Metrics include:
    - HTTP request counts and durations
    - Cycle analysis counts, durations, and cycles detected
    - Cycle cache hit/miss rates and size
    """
    metrics_bytes, content_type = get_metrics_content()

    return Response(
        content=metrics_bytes,
        media_type=content_type,
    )

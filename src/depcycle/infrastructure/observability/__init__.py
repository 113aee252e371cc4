"""Observability infrastructure module.

Provides OpenTelemetry tracing, structured logging, and Prometheus metrics.
"""

from depcycle.infrastructure.observability.logging import configure_logging, get_logger
from depcycle.infrastructure.observability.metrics import (
    get_metrics_content,
    record_cache_hit,
    record_cache_miss,
    record_cycle_analysis,
    record_graph_rejected,
    record_http_request,
    update_cache_size,
)
from depcycle.infrastructure.observability.tracing import (
    instrument_fastapi_app,
    setup_tracing,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Tracing
    "setup_tracing",
    "instrument_fastapi_app",
    # Metrics
    "get_metrics_content",
    "record_http_request",
    "record_cycle_analysis",
    "record_graph_rejected",
    "record_cache_hit",
    "record_cache_miss",
    "update_cache_size",
]

"""Structured logging for the cycle engine.

structlog events carry the request correlation id and the active
OpenTelemetry trace/span ids alongside static service metadata. The domain
and application layers log through stdlib ``logging``, which shares the
same stream and level.
"""

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace

from depcycle.infrastructure.config import get_settings


def configure_logging() -> None:
    """Configure structlog on top of stdlib logging.

    The processor chain, in order: request-scoped context variables, level
    and logger name, ISO UTC timestamp, service metadata, trace context,
    exception formatting, and finally the JSON or console renderer chosen by
    ``OTEL_LOG_JSON_FORMAT``.
    """
    settings = get_settings()
    otel_config = settings.observability
    level = getattr(logging, otel_config.log_level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context(otel_config.service_name, settings.environment),
        _add_trace_context,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if otel_config.log_json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _service_context(service_name: str, environment: str):
    """Build a processor stamping every event with service metadata."""

    def add_service_context(
        logger: logging.Logger,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_service_context


def _add_trace_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Attach trace_id and span_id when a valid span is active."""
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")

    return event_dict


def bind_request_context(**values: Any) -> None:
    """Bind values (e.g. correlation_id) to every log event of this request."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    """Drop request-scoped log context once the response is sent."""
    structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Cycles detected", cycle_type="project", total_cycles=3)
    """
    return structlog.get_logger(name)

"""OpenTelemetry tracing for the cycle engine.

Tracing is off by default. When ``OTEL_TRACING_ENABLED`` is set, spans from
FastAPI requests and from each cycle analysis are batched to an OTLP gRPC
collector. Sampling honours the caller's decision and otherwise samples a
fixed ratio of new traces.
"""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from depcycle import __version__
from depcycle.infrastructure.config import Settings, get_settings
from depcycle.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

# Requests that should never produce spans
EXCLUDED_URLS = "/api/v1/health,/api/v1/metrics"


def setup_tracing() -> TracerProvider | None:
    """Install a global TracerProvider exporting to the OTLP collector.

    Returns:
        The installed provider, or None when tracing is disabled. The caller
        owns shutdown so buffered spans are flushed on exit.
    """
    settings = get_settings()
    otel_config = settings.observability

    if not otel_config.tracing_enabled:
        logger.info("OpenTelemetry tracing disabled")
        return None

    provider = TracerProvider(
        resource=_build_resource(settings),
        sampler=ParentBased(TraceIdRatioBased(otel_config.trace_sample_rate)),
    )

    try:
        exporter = OTLPSpanExporter(
            endpoint=otel_config.exporter_otlp_endpoint,
            insecure=True,
        )
    except Exception as e:
        # Spans are still created (and propagated) without an exporter
        logger.warning(
            "OTLP exporter unavailable, spans will not be exported",
            otlp_endpoint=otel_config.exporter_otlp_endpoint,
            error=str(e),
        )
    else:
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info(
            "OpenTelemetry tracing configured",
            service_name=otel_config.service_name,
            otlp_endpoint=otel_config.exporter_otlp_endpoint,
            sample_rate=otel_config.trace_sample_rate,
        )

    trace.set_tracer_provider(provider)
    return provider


def _build_resource(settings: Settings) -> Resource:
    return Resource.create(
        {
            "service.name": settings.observability.service_name,
            "service.version": __version__,
            "deployment.environment": settings.environment,
        }
    )


def instrument_fastapi_app(app) -> None:
    """Create a server span per request, skipping probes and scrapes.

    Args:
        app: FastAPI application instance
    """
    try:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
    except Exception as e:
        logger.warning("Failed to instrument FastAPI app", error=str(e))
        return

    logger.info("FastAPI auto-instrumentation enabled")

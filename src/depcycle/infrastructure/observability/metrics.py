"""Prometheus metrics instrumentation.

Defines and exports Prometheus metrics for monitoring the application.
Avoids high cardinality by omitting node identifiers from labels.
"""

from prometheus_client import Counter, Gauge, Histogram
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

# HTTP Request Metrics
http_requests_total = Counter(
    name="depcycle_http_requests_total",
    documentation="Total number of HTTP requests",
    labelnames=["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    name="depcycle_http_request_duration_seconds",
    documentation="HTTP request duration in seconds",
    labelnames=["method", "endpoint", "status_code"],
    buckets=(
        0.005,  # 5ms
        0.01,  # 10ms
        0.025,  # 25ms
        0.05,  # 50ms
        0.1,  # 100ms
        0.25,  # 250ms
        0.5,  # 500ms
        1.0,  # 1s
        2.5,  # 2.5s
        5.0,  # 5s
        10.0,  # 10s
    ),
)

# Cycle Analysis Metrics
cycle_analyses_total = Counter(
    name="depcycle_cycle_analyses_total",
    documentation="Total number of cycle analyses run",
    labelnames=["cycle_type"],
)

cycle_analysis_duration_seconds = Histogram(
    name="depcycle_cycle_analysis_duration_seconds",
    documentation="Cycle analysis duration in seconds",
    labelnames=["cycle_type"],
    buckets=(
        0.001,  # 1ms
        0.005,  # 5ms
        0.01,  # 10ms
        0.025,  # 25ms
        0.05,  # 50ms
        0.1,  # 100ms
        0.25,  # 250ms
        0.5,  # 500ms
        1.0,  # 1s
        2.5,  # 2.5s
        10.0,  # 10s
    ),
)

cycles_detected_total = Counter(
    name="depcycle_cycles_detected_total",
    documentation="Total number of dependency cycles detected",
    labelnames=["cycle_type"],
)

graphs_rejected_total = Counter(
    name="depcycle_graphs_rejected_total",
    documentation="Total number of graphs rejected for exceeding size bounds",
    labelnames=["cycle_type"],
)

# Cache Metrics
cache_hits_total = Counter(
    name="depcycle_cache_hits_total",
    documentation="Total number of cache hits",
    labelnames=["cache_type"],
)

cache_misses_total = Counter(
    name="depcycle_cache_misses_total",
    documentation="Total number of cache misses",
    labelnames=["cache_type"],
)

cache_entries = Gauge(
    name="depcycle_cache_entries",
    documentation="Current number of entries held in a cache",
    labelnames=["cache_type"],
)


def get_metrics_content() -> tuple[bytes, str]:
    """Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_bytes, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


def record_http_request(
    method: str,
    endpoint: str,
    status_code: int,
    duration: float,
) -> None:
    """Record HTTP request metrics.

    Args:
        method: HTTP method (GET, POST, etc.)
        endpoint: API endpoint path
        status_code: HTTP status code
        duration: Request duration in seconds
    """
    http_requests_total.labels(
        method=method,
        endpoint=endpoint,
        status_code=str(status_code),
    ).inc()

    http_request_duration_seconds.labels(
        method=method,
        endpoint=endpoint,
        status_code=str(status_code),
    ).observe(duration)


def record_cycle_analysis(
    cycle_type: str,
    cycles_detected: int,
    duration: float,
) -> None:
    """Record a completed cycle analysis.

    Args:
        cycle_type: Kind of entities analyzed (project or class)
        cycles_detected: Number of deduplicated cycles found
        duration: Analysis duration in seconds
    """
    cycle_analyses_total.labels(cycle_type=cycle_type).inc()
    cycle_analysis_duration_seconds.labels(cycle_type=cycle_type).observe(duration)
    cycles_detected_total.labels(cycle_type=cycle_type).inc(cycles_detected)


def record_graph_rejected(cycle_type: str) -> None:
    """Record a graph rejected for exceeding the analysis bounds."""
    graphs_rejected_total.labels(cycle_type=cycle_type).inc()


def record_cache_hit(cache_type: str) -> None:
    """Record cache hit.

    Args:
        cache_type: Type of cache (e.g., 'cycles')
    """
    cache_hits_total.labels(cache_type=cache_type).inc()


def record_cache_miss(cache_type: str) -> None:
    """Record cache miss.

    Args:
        cache_type: Type of cache (e.g., 'cycles')
    """
    cache_misses_total.labels(cache_type=cache_type).inc()


def update_cache_size(cache_type: str, size: int) -> None:
    """Set the current entry count of a cache."""
    cache_entries.labels(cache_type=cache_type).set(size)

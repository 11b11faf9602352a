"""Prometheus metrics for calculation volume, outcomes and latency"""

from prometheus_client import Counter, Histogram, start_http_server

# Calculation metrics
calculation_counter = Counter(
    "fincalc_calculation_total",
    "Total calculations requested",
    ["operation", "outcome"],  # success | validation_error | unavailable | malformed_input
)

calculation_duration_histogram = Histogram(
    "fincalc_calculation_duration_seconds",
    "Calculation latency",
    ["operation"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
)


def record_calculation(operation: str, outcome: str) -> None:
    """Count one calculation attempt and its outcome"""
    calculation_counter.labels(operation=operation, outcome=outcome).inc()


def start_metrics_server(port: int | None) -> bool:
    """Expose /metrics over HTTP when a port is configured"""
    if port is None:
        return False
    start_http_server(port)
    return True

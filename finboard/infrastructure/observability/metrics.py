"""Prometheus metrics for summary traffic, record writes and request latency"""

from prometheus_client import Counter, Histogram

# Summary metrics
summary_counter = Counter(
    "finboard_summary_total",
    "Monthly summaries computed",
    ["variant"],  # budget | restaurant | dashboard
)

# Record metrics
record_mutation_counter = Counter(
    "finboard_record_mutations_total",
    "Records created, updated or deleted",
    ["record_type", "operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_summary(variant: str) -> None:
    summary_counter.labels(variant=variant).inc()


def record_mutation(record_type: str, operation: str) -> None:
    record_mutation_counter.labels(record_type=record_type, operation=operation).inc()

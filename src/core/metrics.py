"""Prometheus metrics for the billing service.

Business Metrics:
- petplan_cadence_check_total: Cadence checks by outcome
- petplan_regularization_quote_total: Regularization quotes by cadence
- petplan_regularization_periods: Periods charged per regularization
- petplan_payment_status_total: Payment status evaluations by status

Technical Metrics:
- petplan_http_requests_total: HTTP requests by endpoint/status
- petplan_http_request_latency_seconds: HTTP request latency
"""

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

cadence_check_total = Counter(
    "petplan_cadence_check_total",
    "Total number of plan/cadence compatibility checks",
    ["outcome"],  # compatible, mismatch
)

regularization_quote_total = Counter(
    "petplan_regularization_quote_total",
    "Total number of regularization quotes",
    ["cadence"],
)

regularization_periods = Histogram(
    "petplan_regularization_periods",
    "Billing periods charged per regularization quote",
    buckets=[1, 2, 3, 6, 12, 24],
)

payment_status_total = Counter(
    "petplan_payment_status_total",
    "Total number of payment status evaluations by calculated status",
    ["status"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

http_requests_total = Counter(
    "petplan_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "petplan_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_cadence_check(compatible: bool) -> None:
    """Record a cadence compatibility check."""
    outcome = "compatible" if compatible else "mismatch"
    cadence_check_total.labels(outcome=outcome).inc()


def record_regularization_quote(cadence: str, periods_charged: int) -> None:
    """Record a regularization quote."""
    regularization_quote_total.labels(cadence=cadence).inc()
    regularization_periods.observe(periods_charged)


def record_payment_status(status: str) -> None:
    """Record a payment status evaluation."""
    payment_status_total.labels(status=status).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST

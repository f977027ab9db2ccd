"""Prometheus metric definitions for the payment-intent handler."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)
# outcome: created | rejected | method_not_allowed | error
payment_intent_requests_total = Counter(
    "payment_intent_requests_total",
    "Payment intent requests by outcome",
    ["service", "outcome"],
)
gateway_latency_seconds = Histogram(
    "gateway_latency_seconds",
    "Latency of payment gateway create calls in seconds",
    ["service"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")

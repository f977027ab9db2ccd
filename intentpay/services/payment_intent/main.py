"""HTTP entrypoint for payment-intent creation.

Runs the handler behind FastAPI for container deployments. The payment
route is mounted as a bare ASGI endpoint, which Starlette routes for every
verb, so non-POST requests get the handler's own 405.
"""

from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from intentpay.common.config import settings
from intentpay.common.logging import request_context
from intentpay.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
)
from intentpay.common.tracing import instrument_app
from intentpay.services.payment_intent.runtime import bootstrap
from intentpay.services.payment_intent.schemas import HandlerResponse

service = bootstrap()
app = FastAPI(title="IntentPay Payment Intent Handler")
instrument_app(app)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Record request count and latency for every HTTP call."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


def render(result: HandlerResponse) -> Response:
    """Convert a handler result into a Starlette response."""

    if isinstance(result.body, str):
        return PlainTextResponse(result.body, status_code=result.status_code, headers=result.headers)
    return JSONResponse(result.body, status_code=result.status_code, headers=result.headers)


async def create_payment_intent(request: Request) -> Response:
    """Create a payment intent and return its client secret."""

    trace_id = request.headers.get("x-correlation-id") or str(uuid4())
    with request_context(trace_id=trace_id, request_id=str(uuid4())):
        body = await request.body()
        return render(await service.handle(request.method, body))


class AnyMethodEndpoint:
    """ASGI wrapper; Starlette only restricts methods for function endpoints."""

    def __init__(self, endpoint) -> None:
        self.endpoint = endpoint

    async def __call__(self, scope, receive, send) -> None:
        response = await self.endpoint(Request(scope, receive))
        await response(scope, receive, send)


app.add_route(
    "/create-payment-intent",
    AnyMethodEndpoint(create_payment_intent),
    include_in_schema=False,
)


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}

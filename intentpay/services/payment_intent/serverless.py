"""Serverless-function entrypoint (Netlify / AWS Lambda proxy events).

The platform calls `handler(event, context)` and expects a dict with
``statusCode``, ``headers`` and ``body``.
"""

import asyncio
import json
from typing import Any

from intentpay.common.logging import request_context
from intentpay.services.payment_intent.runtime import bootstrap
from intentpay.services.payment_intent.schemas import HandlerResponse

service = bootstrap()
# One loop per warm container; the Stripe async HTTP client is bound to it.
_loop = asyncio.new_event_loop()


def _event_method(event: dict[str, Any]) -> str:
    # REST-style events carry httpMethod; HTTP API v2 events nest it.
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method") or ""
    return method


def _event_header(event: dict[str, Any], name: str) -> str:
    # REST API events keep the client's header casing.
    headers = event.get("headers")
    if not isinstance(headers, dict):
        return ""
    for key, value in headers.items():
        if key.lower() == name:
            return value or ""
    return ""


def to_proxy_response(result: HandlerResponse) -> dict[str, Any]:
    """Shape a handler result as a proxy-integration response."""

    if isinstance(result.body, str):
        headers = {"Content-Type": "text/plain; charset=utf-8", **result.headers}
        body = result.body
    else:
        headers = {"Content-Type": "application/json", **result.headers}
        body = json.dumps(result.body)
    return {"statusCode": result.status_code, "headers": headers, "body": body}


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Handle one invocation."""

    request_id = getattr(context, "aws_request_id", "") or ""
    with request_context(trace_id=_event_header(event, "x-correlation-id"), request_id=request_id):
        result = _loop.run_until_complete(
            service.handle(
                _event_method(event),
                event.get("body"),
                base64_encoded=bool(event.get("isBase64Encoded")),
            )
        )
    return to_proxy_response(result)

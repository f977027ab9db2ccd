"""Payment-intent request handling.

Gates the HTTP method, validates the JSON payload, converts the amount to
cents and asks the gateway for a payment intent. Every outcome is returned
as a `HandlerResponse`; nothing escapes `handle`.
"""

import base64
import json
from time import perf_counter
from typing import Any, Protocol

from pydantic import ValidationError

from intentpay.common.logging import logger
from intentpay.common.metrics import gateway_latency_seconds, payment_intent_requests_total
from intentpay.common.tracing import tracer
from intentpay.services.payment_intent.amounts import MINIMUM_AMOUNT_CENTS, to_cents
from intentpay.services.payment_intent.schemas import (
    BELOW_MINIMUM,
    MISSING_INFORMATION,
    HandlerResponse,
    PaymentIntentResult,
    PaymentRequest,
    PaymentValidationError,
)

CURRENCY = "usd"


class PaymentGateway(Protocol):
    async def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        receipt_email: str,
        description: str,
        metadata: dict[str, str],
    ) -> PaymentIntentResult: ...


def parse_payment_request(raw_body: str | bytes | None, base64_encoded: bool = False) -> PaymentRequest:
    """Decode the JSON body and validate the required fields.

    An empty body is treated as ``{}``. Malformed JSON or base64 raises
    `json.JSONDecodeError` or `binascii.Error` unchanged.
    """

    if raw_body and base64_encoded:
        raw_body = base64.b64decode(raw_body, validate=True)
    payload: Any = json.loads(raw_body or "{}")
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise PaymentValidationError(MISSING_INFORMATION)
    try:
        return PaymentRequest.model_validate(payload)
    except ValidationError as exc:
        raise PaymentValidationError(MISSING_INFORMATION) from exc


class PaymentIntentService:
    """Turns one payment request into one gateway payment intent."""

    def __init__(self, gateway: PaymentGateway, service_name: str = "payment-intent") -> None:
        self.gateway = gateway
        self.service_name = service_name

    def _count(self, outcome: str) -> None:
        payment_intent_requests_total.labels(service=self.service_name, outcome=outcome).inc()

    async def handle(
        self,
        method: str,
        raw_body: str | bytes | None,
        base64_encoded: bool = False,
    ) -> HandlerResponse:
        """Run the request through method gate, validation and gateway call."""

        if method != "POST":
            self._count("method_not_allowed")
            return HandlerResponse(
                status_code=405,
                headers={"Allow": "POST"},
                body="Method Not Allowed",
            )

        try:
            req = parse_payment_request(raw_body, base64_encoded)
            amount_cents = to_cents(req.amount)
            if amount_cents < MINIMUM_AMOUNT_CENTS:
                raise PaymentValidationError(BELOW_MINIMUM)
            result = await self._create_intent(req, amount_cents)
        except PaymentValidationError as exc:
            self._count("rejected")
            logger.info("payment request rejected reason=%s", exc)
            return HandlerResponse.error(400, str(exc))
        except Exception as exc:
            self._count("error")
            logger.exception("payment intent creation failed: %s", exc)
            return HandlerResponse.error(500, f"An internal server error occurred: {exc}")

        self._count("created")
        return HandlerResponse.success(result.to_wire())

    async def _create_intent(self, req: PaymentRequest, amount_cents: int) -> PaymentIntentResult:
        start = perf_counter()
        with tracer.start_as_current_span("gateway.create_payment_intent") as span:
            span.set_attribute("payment.amount_cents", amount_cents)
            span.set_attribute("payment.currency", CURRENCY)
            try:
                return await self.gateway.create_payment_intent(
                    amount_cents=amount_cents,
                    currency=CURRENCY,
                    receipt_email=req.customer_email,
                    description=req.description,
                    metadata={"customerName": req.customer_name},
                )
            finally:
                gateway_latency_seconds.labels(service=self.service_name).observe(
                    max(0.0, perf_counter() - start)
                )

"""Stripe client wrapper used to create payment intents."""

import stripe

from intentpay.common.logging import logger
from intentpay.services.payment_intent.schemas import PaymentIntentResult


class GatewayError(RuntimeError):
    """Stripe rejected or failed the request."""


class StripeGateway:
    """Creates payment intents through the Stripe API.

    Built once per process; holds no per-request state.
    """

    def __init__(self, api_key: str, api_version: str) -> None:
        self.client = stripe.StripeClient(api_key, stripe_version=api_version)

    async def create_payment_intent(
        self,
        amount_cents: int,
        currency: str,
        receipt_email: str,
        description: str,
        metadata: dict[str, str],
    ) -> PaymentIntentResult:
        """Create one payment intent with automatic payment methods enabled."""

        try:
            intent = await self.client.v1.payment_intents.create_async(
                params={
                    "amount": amount_cents,
                    "currency": currency,
                    "receipt_email": receipt_email,
                    "description": description,
                    "metadata": metadata,
                    "automatic_payment_methods": {"enabled": True},
                }
            )
        except stripe.StripeError as exc:
            logger.warning(
                "stripe_error type=%s code=%s request_id=%s",
                type(exc).__name__,
                exc.code,
                exc.request_id,
            )
            raise GatewayError(exc.user_message or str(exc)) from exc
        return PaymentIntentResult(client_secret=intent.client_secret)

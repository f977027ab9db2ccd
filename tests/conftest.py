"""Shared fixtures: test environment and a recording fake gateway."""

import os

os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy")
os.environ["TRACING_ENABLED"] = "false"

import pytest  # noqa: E402

from intentpay.services.payment_intent.schemas import PaymentIntentResult  # noqa: E402


class FakeGateway:
    """Records create calls and returns a fixed client secret (or raises)."""

    def __init__(self, client_secret: str = "pi_123_secret_456", error: Exception | None = None) -> None:
        self.client_secret = client_secret
        self.error = error
        self.calls: list[dict] = []

    async def create_payment_intent(self, **kwargs) -> PaymentIntentResult:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return PaymentIntentResult(client_secret=self.client_secret)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def valid_payload():
    return {
        "amount": 25.00,
        "customerEmail": "a@b.com",
        "customerName": "A B",
        "description": "Order #1",
    }


@pytest.fixture
def declining_gateway():
    return FakeGateway(error=RuntimeError("card_declined"))

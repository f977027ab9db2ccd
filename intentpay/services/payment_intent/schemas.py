"""Request/response schemas for the payment-intent handler."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


MISSING_INFORMATION = "Missing required payment information."
BELOW_MINIMUM = "Amount must be at least $0.50."


class PaymentValidationError(ValueError):
    """Client-correctable request problem, answered with HTTP 400."""


class PaymentRequest(BaseModel):
    """Payload accepted by `POST /create-payment-intent`.

    Wire names are camelCase; `amount` is in major currency units.
    """

    model_config = ConfigDict(populate_by_name=True)

    amount: float
    customer_email: StrictStr = Field(alias="customerEmail", min_length=1)
    customer_name: StrictStr = Field(alias="customerName", min_length=1)
    description: StrictStr = Field(min_length=1)

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_is_number(cls, value: Any) -> Any:
        # JSON numbers only; zero counts as missing, not as below the minimum.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("amount must be a number")
        if value == 0 or math.isnan(value) or math.isinf(value):
            raise ValueError("amount is required")
        return value


class PaymentIntentResult(BaseModel):
    """Client secret returned by the gateway, passed through unchanged."""

    client_secret: str

    def to_wire(self) -> dict[str, str]:
        return {"clientSecret": self.client_secret}


class HandlerResponse(BaseModel):
    """Transport-neutral response rendered by the FastAPI and serverless surfaces."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] | str

    @classmethod
    def success(cls, body: dict[str, Any]) -> "HandlerResponse":
        return cls(status_code=200, body=body)

    @classmethod
    def error(cls, status_code: int, message: str) -> "HandlerResponse":
        return cls(status_code=status_code, body={"error": message})

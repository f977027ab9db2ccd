"""Unit tests for JSON body parsing and required-field validation."""

import base64
import binascii
import json

import pytest

from intentpay.services.payment_intent.schemas import MISSING_INFORMATION, PaymentValidationError
from intentpay.services.payment_intent.service import parse_payment_request


def test_parses_camel_case_fields(valid_payload):
    """Wire names map onto the request model."""

    req = parse_payment_request(json.dumps(valid_payload))

    assert req.amount == 25.0
    assert req.customer_email == "a@b.com"
    assert req.customer_name == "A B"
    assert req.description == "Order #1"


def test_accepts_bytes_body(valid_payload):
    req = parse_payment_request(json.dumps(valid_payload).encode("utf-8"))

    assert req.customer_email == "a@b.com"


@pytest.mark.parametrize("field", ["amount", "customerEmail", "customerName", "description"])
def test_missing_field_rejected(valid_payload, field):
    """Every one of the four fields is required."""

    del valid_payload[field]

    with pytest.raises(PaymentValidationError, match=MISSING_INFORMATION):
        parse_payment_request(json.dumps(valid_payload))


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("amount", 0),
        ("amount", "25.00"),
        ("amount", True),
        ("amount", None),
        ("customerEmail", ""),
        ("customerName", ""),
        ("description", ""),
        ("description", None),
    ],
)
def test_falsy_or_non_numeric_values_rejected(valid_payload, field, value):
    """Falsy values count as missing and amount must be a JSON number."""

    valid_payload[field] = value

    with pytest.raises(PaymentValidationError, match=MISSING_INFORMATION):
        parse_payment_request(json.dumps(valid_payload))


def test_nan_amount_rejected(valid_payload):
    body = json.dumps(valid_payload).replace("25.0", "NaN")

    with pytest.raises(PaymentValidationError):
        parse_payment_request(body)


@pytest.mark.parametrize("body", [None, "", b"", "null", "[]", '"text"', "42"])
def test_empty_or_non_object_body_rejected(body):
    """Empty bodies parse as {} and non-object JSON carries no fields."""

    with pytest.raises(PaymentValidationError, match=MISSING_INFORMATION):
        parse_payment_request(body)


def test_malformed_json_propagates():
    """Broken JSON is not a validation error; the caller maps it to 500."""

    with pytest.raises(json.JSONDecodeError):
        parse_payment_request("{not json")


def test_base64_body_decoded(valid_payload):
    body = base64.b64encode(json.dumps(valid_payload).encode("utf-8"))

    req = parse_payment_request(body, base64_encoded=True)

    assert req.description == "Order #1"


def test_malformed_base64_propagates():
    with pytest.raises(binascii.Error):
        parse_payment_request("!!!notb64", base64_encoded=True)

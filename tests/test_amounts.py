"""Unit tests for major-unit to cents conversion."""

import pytest

from intentpay.services.payment_intent.amounts import MINIMUM_AMOUNT_CENTS, to_cents


@pytest.mark.parametrize(
    ("amount", "cents"),
    [
        (10.004, 1000),
        (10.006, 1001),
        (25.00, 2500),
        (25, 2500),
        (0.5, 50),
        (0.49, 49),
    ],
)
def test_to_cents_rounds_to_nearest_cent(amount, cents):
    """Amounts round to the nearest whole cent."""

    assert to_cents(amount) == cents


def test_to_cents_breaks_ties_upward():
    """A half cent rounds up even where the binary float sits just below it."""

    assert to_cents(2.005) == 201
    assert to_cents(1.115) == 112


def test_to_cents_negative_amount_rounds_away_from_zero():
    """Negative ties move away from zero, and stay below the minimum."""

    assert to_cents(-0.005) == -1
    assert to_cents(-3.0) < MINIMUM_AMOUNT_CENTS


def test_to_cents_handles_amounts_beyond_decimal_precision():
    """Very large amounts convert exactly; the gateway decides whether they are acceptable."""

    assert to_cents(1e30) == 10**32

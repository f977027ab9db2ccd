"""Major-unit to minor-unit amount conversion."""

from decimal import ROUND_HALF_UP, Decimal

MINIMUM_AMOUNT_CENTS = 50


def to_cents(amount: int | float) -> int:
    """Convert a major-unit amount to integer cents.

    Rounds half away from zero on the decimal text of the amount, so
    ``2.005`` becomes 201 rather than following the binary float value.
    """

    # str() keeps the shortest repr, e.g. 10.006 and not 10.0059999...
    cents = Decimal(str(amount)) * 100
    # Not bounded by the 28-digit context precision.
    return int(cents.to_integral_value(rounding=ROUND_HALF_UP))

"""
Conversion between major currency amounts (dollars) and the minor units
(cents) the store keeps nightly costs in.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

MINOR_UNITS_PER_MAJOR = 100

Amount = Union[int, float, str, Decimal]


def to_minor_units(amount: Amount) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Floats go through ``str`` so that 19.99 becomes 1999 rather than 1998.
    Fractions of a minor unit round half up.

    Raises:
        ValueError: If the amount is negative, not finite or not a number.
    """
    if isinstance(amount, bool):
        raise ValueError(f"Invalid currency amount: {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Invalid currency amount: {amount!r}")

    if not value.is_finite():
        raise ValueError(f"Currency amount must be finite: {amount!r}")
    if value < 0:
        raise ValueError(f"Currency amount cannot be negative: {amount!r}")

    minor = (value * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(minor)


def from_minor_units(amount: int) -> Decimal:
    """Convert integer minor units back to a two-place major-unit Decimal."""
    return (Decimal(amount) / MINOR_UNITS_PER_MAJOR).quantize(Decimal("0.01"))

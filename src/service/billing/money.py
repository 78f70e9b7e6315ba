"""
Money conversion at system boundaries.

Amounts are integer cents everywhere inside the engine; decimal major-unit
values only exist in storage columns and display strings.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CENT = Decimal("0.01")


def to_cents(value: Union[Decimal, str, int]) -> int:
    """
    Convert a major-unit amount to integer cents.

    Examples:
        to_cents("49.90")          -> 4990
        to_cents(Decimal("10.005")) -> 1001
        to_cents(12)               -> 1200

    Raises:
        ValueError: If the value is not a finite number
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")

    return int(amount.quantize(CENT, rounding=ROUND_HALF_UP) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENT)


def format_cents(cents: int) -> str:
    """Render cents as a major-unit string, e.g. 4990 -> "49.90"."""
    return str(from_cents(cents))

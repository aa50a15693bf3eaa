"""
Price values.

Prices are ``decimal.Decimal`` throughout; ``as_price`` is the single place
where user input becomes a price.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

PriceLike = Union[Decimal, int, float, str]


def as_price(value: PriceLike) -> Decimal:
    """
    Convert a number to a Decimal price.

    Floats go through their string form so that ``0.1`` becomes
    ``Decimal('0.1')`` rather than its binary expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    if isinstance(value, Decimal):
        price = value
    else:
        try:
            price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValueError(f"Invalid price: {value!r}") from e
    if not price.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    return price

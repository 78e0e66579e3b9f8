"""Exact decimal conversion for currency values."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from numbers import Integral
from typing import Union

from hotel_inventory.domain.constraints import InvalidPriceError


DecimalLike = Union[Decimal, str, int, float]


def to_decimal(value: DecimalLike) -> Decimal:
    """Convert a price literal to ``Decimal`` without a binary float step.

    Floats go through their shortest round-tripping text, so ``170.01`` becomes
    ``Decimal("170.01")`` rather than ``Decimal(170.01)``'s 46-digit expansion.
    Float and integer subclasses such as ``np.float64`` and ``np.int64`` are
    read through the builtin type first.
    """
    if isinstance(value, bool):
        raise InvalidPriceError("price must be numeric, got bool")
    if isinstance(value, Decimal):
        return _require_finite(value, value)

    try:
        if isinstance(value, float):
            # float.__repr__ ignores subclass reprs like "np.float64(...)".
            result = Decimal(float.__repr__(float(value)))
        elif isinstance(value, Integral):
            result = Decimal(int(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            raise InvalidPriceError(
                f"price must be Decimal, str, int or float, got {type(value).__name__}"
            )
    except InvalidOperation as exc:
        raise InvalidPriceError(f"price '{value}' is not a decimal number") from exc

    return _require_finite(result, value)


def _require_finite(result: Decimal, value: object) -> Decimal:
    if not result.is_finite():
        raise InvalidPriceError(f"price must be finite, got {value}")
    return result

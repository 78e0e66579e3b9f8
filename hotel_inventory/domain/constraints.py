"""Domain-level validation rules for inventory and price declarations."""

from __future__ import annotations

from numbers import Integral
from typing import Any


class ConfigurationError(Exception):
    """Base exception for rejected inventory or pricing declarations."""


class InvalidIntervalError(ConfigurationError):
    """Raised when an interval is inverted, empty, or malformed."""


class InvalidQuantityError(ConfigurationError):
    """Raised when a room quantity is not an integer."""


class InvalidPriceError(ConfigurationError):
    """Raised when a price bound cannot be read as a finite decimal."""


class InvalidBedTypeError(ConfigurationError):
    """Raised when a bed type name is not a known BedType."""


def is_integer_value(value: Any) -> bool:
    # bool is an int subclass; np.int64 is only an Integral.
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_quantity(quantity: Any) -> int:
    if not is_integer_value(quantity):
        raise InvalidQuantityError(
            f"quantity must be an integer, got {type(quantity).__name__}"
        )
    return int(quantity)


def validate_interval_bounds(lower: Any, upper: Any, *, label: str) -> None:
    if lower > upper:
        raise InvalidIntervalError(
            f"{label} lower bound {lower} must not exceed upper bound {upper}"
        )

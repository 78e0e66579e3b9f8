"""Domain models for hotel room inventory and pricing schedules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar


T = TypeVar("T")


class BedType(str, Enum):
    QUEEN = "QUEEN"
    KING = "KING"


@dataclass(frozen=True)
class RoomSpec:
    bed_type: BedType
    is_double: bool = False


@dataclass(frozen=True)
class ClosedInterval(Generic[T]):
    """Interval including both ``lower`` and ``upper``."""

    lower: T
    upper: T

    def __contains__(self, value: Any) -> bool:
        return self.lower <= value <= self.upper

    def overlaps(self, other: ClosedInterval[T]) -> bool:
        return self.lower <= other.upper and other.lower <= self.upper


@dataclass(frozen=True)
class PriceBand:
    days_before_stay_range: ClosedInterval[int]
    price_range: ClosedInterval[Decimal]


@dataclass(frozen=True)
class InventorySummary:
    room_count: int
    price_band_count: int

    def to_dict(self) -> dict[str, int]:
        return {
            "room_count": self.room_count,
            "price_band_count": self.price_band_count,
        }


@dataclass(frozen=True)
class Sale:
    account_id: int
    sale_date: date
    billing_amount: float

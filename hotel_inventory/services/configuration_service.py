"""Nested declaration builder for a hotel's room inventory and price schedule.

A ``ConfigurationModel`` is populated in two independent phases. Each phase
hands a fresh collector to caller code, either through a callback::

    model.declare_rooms(lambda rooms: rooms.add_queen(60))

or through a ``with`` block::

    with model.prices() as prices:
        prices.add_range((0, 4), ("170.01", "200.00"))

The collector's contents are merged into the model only once the declaration
completes, so a declaration that raises leaves the model untouched.
"""

from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Sequence, Union

import pandas as pd

from hotel_inventory.domain.constraints import (
    InvalidBedTypeError,
    InvalidIntervalError,
    is_integer_value,
    validate_interval_bounds,
    validate_quantity,
)
from hotel_inventory.domain.models import (
    BedType,
    ClosedInterval,
    InventorySummary,
    PriceBand,
    RoomSpec,
)
from hotel_inventory.utils.config import Settings, get_settings
from hotel_inventory.utils.decimals import DecimalLike, to_decimal
from hotel_inventory.utils.logger import get_logger

if TYPE_CHECKING:
    from hotel_inventory.schemas.declarations import HotelDeclaration


logger = get_logger(__name__)

DayRangeInput = Union[ClosedInterval[int], range, Sequence[int]]
PriceRangeInput = Union[ClosedInterval[Any], Sequence[DecimalLike]]


def _require_int_bound(value: Any, label: str) -> int:
    if not is_integer_value(value):
        raise InvalidIntervalError(f"{label} bounds must be integers, got {value!r}")
    return int(value)


def _unpack_pair(value: Any, label: str) -> tuple[Any, Any]:
    if isinstance(value, ClosedInterval):
        return value.lower, value.upper
    if isinstance(value, (str, bytes)):
        raise InvalidIntervalError(f"{label} must be a (lower, upper) pair")
    try:
        lower, upper = value
    except (TypeError, ValueError) as exc:
        raise InvalidIntervalError(f"{label} must be a (lower, upper) pair") from exc
    return lower, upper


def to_day_interval(value: DayRangeInput) -> ClosedInterval[int]:
    """Normalize a day range; ``range(0, 5)`` and ``(0, 4)`` both mean 0..4."""
    if isinstance(value, range):
        if value.step != 1:
            raise InvalidIntervalError("days_before_stay range must have step 1")
        return ClosedInterval(lower=value.start, upper=value.stop - 1)

    lower, upper = _unpack_pair(value, "days_before_stay")
    return ClosedInterval(
        lower=_require_int_bound(lower, "days_before_stay"),
        upper=_require_int_bound(upper, "days_before_stay"),
    )


def to_price_interval(value: PriceRangeInput) -> ClosedInterval[Decimal]:
    lower, upper = _unpack_pair(value, "price_range")
    return ClosedInterval(lower=to_decimal(lower), upper=to_decimal(upper))


class RoomCollector:
    """Expands bed-type/quantity requests into individual room specs."""

    def __init__(self) -> None:
        self._rooms: list[RoomSpec] = []

    @property
    def rooms(self) -> list[RoomSpec]:
        return list(self._rooms)

    def add_queen(self, quantity: int) -> None:
        self.add(BedType.QUEEN, quantity, is_double=False)

    def add_king(self, quantity: int) -> None:
        self.add(BedType.KING, quantity, is_double=False)

    def add_double_queen(self, quantity: int) -> None:
        self.add(BedType.QUEEN, quantity, is_double=True)

    def add_double_king(self, quantity: int) -> None:
        self.add(BedType.KING, quantity, is_double=True)

    def add(self, bed_type: BedType | str, quantity: int, is_double: bool = False) -> None:
        quantity = validate_quantity(quantity)
        try:
            resolved_bed_type = BedType(bed_type)
        except ValueError as exc:
            raise InvalidBedTypeError(f"unknown bed type {bed_type!r}") from exc
        if quantity <= 0:
            logger.debug(
                "Room request produced no rooms | bed_type=%s | quantity=%s | is_double=%s",
                resolved_bed_type.value,
                quantity,
                is_double,
            )
            return

        # One RoomSpec per room, never a shared count.
        self._rooms.extend(
            RoomSpec(bed_type=resolved_bed_type, is_double=bool(is_double))
            for _ in range(quantity)
        )


class PriceCollector:
    """Builds price bands from day-range/price-range pairs."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._bands: list[PriceBand] = []

    @property
    def bands(self) -> list[PriceBand]:
        return list(self._bands)

    def add_range(
        self,
        days_before_stay: DayRangeInput,
        price_range: PriceRangeInput,
    ) -> PriceBand:
        band = PriceBand(
            days_before_stay_range=to_day_interval(days_before_stay),
            price_range=to_price_interval(price_range),
        )
        if self._settings.reject_inverted_intervals:
            validate_interval_bounds(
                band.days_before_stay_range.lower,
                band.days_before_stay_range.upper,
                label="days_before_stay",
            )
            validate_interval_bounds(
                band.price_range.lower,
                band.price_range.upper,
                label="price_range",
            )

        # Overlapping day ranges are accepted as-is.
        self._bands.append(band)
        return band


class ConfigurationModel:
    """Accumulates room and price declarations and reports what was collected."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._room_specs: list[RoomSpec] = []
        self._price_bands: list[PriceBand] = []

    @property
    def room_specs(self) -> tuple[RoomSpec, ...]:
        return tuple(self._room_specs)

    @property
    def price_bands(self) -> tuple[PriceBand, ...]:
        return tuple(self._price_bands)

    def _merge_rooms(self, collector: RoomCollector) -> None:
        added = collector.rooms
        self._room_specs.extend(added)
        logger.debug(
            "Room declaration merged | added=%s | total=%s",
            len(added),
            len(self._room_specs),
        )

    def _merge_prices(self, collector: PriceCollector) -> None:
        added = collector.bands
        self._price_bands.extend(added)
        logger.debug(
            "Price declaration merged | added=%s | total=%s",
            len(added),
            len(self._price_bands),
        )

    def declare_rooms(self, configure: Callable[[RoomCollector], None]) -> None:
        collector = RoomCollector()
        configure(collector)
        self._merge_rooms(collector)

    def declare_prices(self, configure: Callable[[PriceCollector], None]) -> None:
        collector = PriceCollector(settings=self._settings)
        configure(collector)
        self._merge_prices(collector)

    @contextmanager
    def rooms(self) -> Iterator[RoomCollector]:
        collector = RoomCollector()
        yield collector
        self._merge_rooms(collector)

    @contextmanager
    def prices(self) -> Iterator[PriceCollector]:
        collector = PriceCollector(settings=self._settings)
        yield collector
        self._merge_prices(collector)

    def apply_declaration(self, declaration: HotelDeclaration) -> None:
        """Replay a validated declaration record as one rooms and one prices phase."""
        with self.rooms() as rooms:
            for room in declaration.rooms:
                rooms.add(room.bed_type, room.quantity, is_double=room.is_double)

        with self.prices() as prices:
            for band in declaration.prices:
                prices.add_range(
                    (band.min_days, band.max_days),
                    (band.min_price, band.max_price),
                )

    def summarize(self) -> InventorySummary:
        return InventorySummary(
            room_count=len(self._room_specs),
            price_band_count=len(self._price_bands),
        )

    def execute_optimization(self) -> InventorySummary:
        """Report the collected input; no optimization is performed yet."""
        summary = self.summarize()
        print(
            f"Input contains {summary.room_count} rooms and "
            f"{summary.price_band_count} price ranges."
        )
        print("Executing optimization operations...")
        logger.info(
            "Optimization input summarized | rooms=%s | price_bands=%s",
            summary.room_count,
            summary.price_band_count,
        )
        return summary

    def inventory_breakdown(self) -> pd.DataFrame:
        """Room counts per (bed_type, is_double) in first-declared order."""
        columns = ["bed_type", "is_double"]
        frame = pd.DataFrame(
            [
                {"bed_type": room.bed_type.value, "is_double": room.is_double}
                for room in self._room_specs
            ],
            columns=columns,
        )
        if frame.empty:
            return pd.DataFrame(columns=[*columns, "quantity"])

        return (
            frame.groupby(columns, sort=False)
            .size()
            .reset_index(name="quantity")
        )

    def price_schedule_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "min_days": band.days_before_stay_range.lower,
                    "max_days": band.days_before_stay_range.upper,
                    "min_price": band.price_range.lower,
                    "max_price": band.price_range.upper,
                }
                for band in self._price_bands
            ],
            columns=["min_days", "max_days", "min_price", "max_price"],
        )


def hotel(
    configure: Optional[Callable[[ConfigurationModel], None]] = None,
    *,
    settings: Optional[Settings] = None,
) -> ConfigurationModel:
    """Create a model and run ``configure`` against it."""
    model = ConfigurationModel(settings=settings)
    if configure is not None:
        configure(model)
    return model

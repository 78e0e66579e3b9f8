"""Declaration records validated before entering the builder."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from hotel_inventory.domain.constraints import InvalidPriceError
from hotel_inventory.domain.models import BedType
from hotel_inventory.utils.decimals import to_decimal


class RoomDeclaration(BaseModel):
    bed_type: BedType
    quantity: int = Field(ge=0, strict=True)
    is_double: bool = False


class PriceBandDeclaration(BaseModel):
    """One price band; prices are read exactly, never through a float."""

    min_days: int = Field(ge=0)
    max_days: int = Field(ge=0)
    min_price: Decimal = Field(ge=0)
    max_price: Decimal = Field(ge=0)

    @field_validator("min_price", "max_price", mode="before")
    @classmethod
    def coerce_exact_price(cls, value: Any) -> Decimal:
        try:
            return to_decimal(value)
        except InvalidPriceError as exc:
            raise ValueError(str(exc)) from exc

    @model_validator(mode="after")
    def validate_bounds_order(self) -> PriceBandDeclaration:
        if self.min_days > self.max_days:
            raise ValueError("min_days must not exceed max_days")
        if self.min_price > self.max_price:
            raise ValueError("min_price must not exceed max_price")
        return self


class HotelDeclaration(BaseModel):
    rooms: list[RoomDeclaration] = Field(default_factory=list)
    prices: list[PriceBandDeclaration] = Field(default_factory=list)

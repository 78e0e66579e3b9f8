from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest
from pydantic import ValidationError

from hotel_inventory.domain.models import BedType, RoomSpec
from hotel_inventory.schemas.declarations import (
    HotelDeclaration,
    PriceBandDeclaration,
    RoomDeclaration,
)
from hotel_inventory.services.configuration_service import ConfigurationModel


def _declaration_payload() -> dict:
    return {
        "rooms": [
            {"bed_type": "QUEEN", "quantity": 2},
            {"bed_type": "KING", "quantity": 1, "is_double": True},
        ],
        "prices": [
            {"min_days": 0, "max_days": 4, "min_price": 170.01, "max_price": "200.00"},
            {"min_days": 3, "max_days": 10, "min_price": "150.01", "max_price": 170},
        ],
    }


def test_price_declaration_reads_float_prices_exactly() -> None:
    band = PriceBandDeclaration(min_days=0, max_days=4, min_price=170.01, max_price=200.00)
    assert band.min_price == Decimal("170.01")
    assert str(band.min_price) == "170.01"


def test_price_declaration_reads_numpy_prices_exactly() -> None:
    band = PriceBandDeclaration(
        min_days=0,
        max_days=4,
        min_price=np.float64(170.01),
        max_price=np.float64(200.0),
    )
    assert band.min_price == Decimal("170.01")
    assert band.max_price == Decimal("200.00")


def test_inverted_day_bounds_rejected() -> None:
    with pytest.raises(ValidationError, match="min_days must not exceed max_days"):
        PriceBandDeclaration(min_days=5, max_days=4, min_price="1", max_price="2")


def test_inverted_price_bounds_rejected() -> None:
    with pytest.raises(ValidationError, match="min_price must not exceed max_price"):
        PriceBandDeclaration(min_days=0, max_days=4, min_price="200", max_price="170")


def test_negative_price_rejected() -> None:
    with pytest.raises(ValidationError):
        PriceBandDeclaration(min_days=0, max_days=4, min_price="-1", max_price="2")


def test_unreadable_price_rejected() -> None:
    with pytest.raises(ValidationError):
        PriceBandDeclaration(min_days=0, max_days=4, min_price="cheap", max_price="2")


@pytest.mark.parametrize("quantity", [-1, True, "3", 2.0])
def test_room_declaration_rejects_bad_quantity(quantity) -> None:
    with pytest.raises(ValidationError):
        RoomDeclaration(bed_type="QUEEN", quantity=quantity)


def test_room_declaration_rejects_unknown_bed_type() -> None:
    with pytest.raises(ValidationError):
        RoomDeclaration(bed_type="TWIN", quantity=1)


def test_apply_declaration_populates_model_in_order() -> None:
    declaration = HotelDeclaration.model_validate(_declaration_payload())
    model = ConfigurationModel()

    model.apply_declaration(declaration)

    assert model.room_specs == (
        RoomSpec(BedType.QUEEN, False),
        RoomSpec(BedType.QUEEN, False),
        RoomSpec(BedType.KING, True),
    )
    assert model.summarize().price_band_count == 2
    assert model.price_bands[0].price_range.lower == Decimal("170.01")
    assert model.price_bands[1].price_range.upper == Decimal("170")


def test_apply_declaration_appends_to_existing_inventory() -> None:
    model = ConfigurationModel()
    model.declare_rooms(lambda rooms: rooms.add_king(5))

    model.apply_declaration(HotelDeclaration.model_validate(_declaration_payload()))

    assert model.summarize().room_count == 8
    assert model.room_specs[0] == RoomSpec(BedType.KING, False)


def test_empty_declaration_is_valid() -> None:
    model = ConfigurationModel()
    model.apply_declaration(HotelDeclaration())
    assert model.summarize().to_dict() == {"room_count": 0, "price_band_count": 0}

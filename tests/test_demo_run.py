from __future__ import annotations

from decimal import Decimal

from hotel_inventory.domain.models import BedType, RoomSpec
from hotel_inventory.main import build_demo_hotel, main


def test_demo_hotel_summarizes_to_160_rooms_and_4_bands() -> None:
    summary = build_demo_hotel().summarize()
    assert summary.room_count == 160
    assert summary.price_band_count == 4


def test_demo_hotel_inventory_breakdown() -> None:
    breakdown = build_demo_hotel().inventory_breakdown()
    assert breakdown["bed_type"].tolist() == ["QUEEN", "QUEEN", "KING", "KING"]
    assert breakdown["is_double"].tolist() == [False, True, False, True]
    assert breakdown["quantity"].tolist() == [60, 60, 20, 20]


def test_demo_hotel_price_schedule() -> None:
    model = build_demo_hotel()
    bands = model.price_bands

    assert [band.days_before_stay_range.upper for band in bands] == [4, 10, 20, 60]
    assert bands[0].price_range.lower == Decimal("170.01")
    assert bands[3].price_range.lower == Decimal("75.00")
    assert model.room_specs[-1] == RoomSpec(BedType.KING, is_double=True)


def test_execute_optimization_prints_summary_lines(capsys) -> None:
    summary = build_demo_hotel().execute_optimization()

    lines = capsys.readouterr().out.splitlines()
    summary_index = lines.index("Input contains 160 rooms and 4 price ranges.")
    assert lines[summary_index + 1] == "Executing optimization operations..."
    assert summary.to_dict() == {"room_count": 160, "price_band_count": 4}


def test_main_returns_success(capsys) -> None:
    assert main() == 0
    assert "Executing optimization operations..." in capsys.readouterr().out

"""Fixed demo inventory, price schedule, and sample sales records."""

from __future__ import annotations

from datetime import date

from hotel_inventory.domain.models import BedType, Sale


# (bed_type, quantity, is_double)
DEMO_ROOM_REQUESTS: tuple[tuple[BedType, int, bool], ...] = (
    (BedType.QUEEN, 60, False),
    (BedType.QUEEN, 60, True),
    (BedType.KING, 20, False),
    (BedType.KING, 20, True),
)

# ((first_day, last_day), (min_price, max_price)); prices kept as text.
DEMO_PRICE_BANDS: tuple[tuple[tuple[int, int], tuple[str, str]], ...] = (
    ((0, 4), ("170.01", "200.00")),
    ((5, 10), ("150.01", "170.00")),
    ((11, 20), ("110.01", "150.00")),
    ((21, 60), ("75.00", "110.00")),
)

SAMPLE_SALES: tuple[Sale, ...] = (
    Sale(1, date(2016, 12, 3), 180.0),
    Sale(2, date(2016, 7, 4), 140.2),
    Sale(3, date(2016, 6, 3), 111.4),
    Sale(4, date(2016, 1, 5), 192.7),
    Sale(5, date(2016, 5, 4), 137.9),
    Sale(6, date(2016, 3, 6), 125.6),
    Sale(7, date(2016, 12, 4), 164.3),
    Sale(8, date(2016, 7, 11), 144.2),
)

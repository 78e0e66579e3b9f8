"""Demo run: declare the fixed hotel inventory and report it."""

from __future__ import annotations

from typing import Optional

from hotel_inventory.repository.seed_data import DEMO_PRICE_BANDS, DEMO_ROOM_REQUESTS
from hotel_inventory.services.configuration_service import ConfigurationModel, hotel
from hotel_inventory.utils.config import Settings
from hotel_inventory.utils.logger import get_logger


logger = get_logger(__name__)


def build_demo_hotel(settings: Optional[Settings] = None) -> ConfigurationModel:
    """160 rooms and four booking-window price bands."""

    def configure(model: ConfigurationModel) -> None:
        with model.rooms() as rooms:
            for bed_type, quantity, is_double in DEMO_ROOM_REQUESTS:
                rooms.add(bed_type, quantity, is_double=is_double)

        with model.prices() as prices:
            for days_before_stay, price_range in DEMO_PRICE_BANDS:
                prices.add_range(days_before_stay, price_range)

    return hotel(configure, settings=settings)


def main() -> int:
    model = build_demo_hotel()
    model.execute_optimization()
    logger.debug("Demo run completed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

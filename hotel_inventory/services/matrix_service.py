"""Flatten record sequences into row-major numeric matrices."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

import numpy as np

from hotel_inventory.domain.models import Sale
from hotel_inventory.repository.seed_data import SAMPLE_SALES
from hotel_inventory.utils.logger import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


def to_matrix(items: Iterable[T], *selectors: Callable[[T], float]) -> np.ndarray:
    """Build an ``(n_items, n_selectors)`` float matrix.

    Row ``i`` holds ``selector(item_i)`` for each selector, in the order the
    selectors were given.
    """
    if not selectors:
        raise ValueError("at least one value selector is required")

    rows = list(items)
    values = np.fromiter(
        (float(selector(item)) for item in rows for selector in selectors),
        dtype=np.float64,
        count=len(rows) * len(selectors),
    )
    matrix = values.reshape(len(rows), len(selectors))
    logger.debug("Matrix built | rows=%s | columns=%s", *matrix.shape)
    return matrix


def sales_matrix(sales: Sequence[Sale] = SAMPLE_SALES) -> np.ndarray:
    """Columns: year, month, day, billing_amount."""
    return to_matrix(
        sales,
        lambda sale: sale.sale_date.year,
        lambda sale: sale.sale_date.month,
        lambda sale: sale.sale_date.day,
        lambda sale: sale.billing_amount,
    )

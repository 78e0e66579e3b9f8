#!/usr/bin/env python3
"""Print the sample sales records as a year/month/day/amount matrix."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hotel_inventory.services.matrix_service import sales_matrix


def main() -> int:
    print(sales_matrix())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

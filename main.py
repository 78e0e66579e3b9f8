"""
main.py: Demo launcher.

Run this file to declare the demo hotel and print its input summary:

    python main.py

This file does NOT contain application logic. See hotel_inventory/main.py for
the demo inventory wiring and hotel_inventory/services/ for the builder.

Installed console script (same behaviour):
    hotel-inventory
"""

from __future__ import annotations

from hotel_inventory.main import main


if __name__ == "__main__":
    raise SystemExit(main())

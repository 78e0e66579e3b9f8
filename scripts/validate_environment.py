#!/usr/bin/env python3
"""Validate local environment readiness for the hotel inventory builder."""

from __future__ import annotations

import importlib
import sys
from decimal import Decimal
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

SEPARATOR_LINE = "=" * 44


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def main() -> int:
    results: list[str] = []
    all_passed = True

    # CHECK 1: Python version >= 3.10
    if sys.version_info >= (3, 10):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.10",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2: Required packages importable
    package_specs = ["numpy", "pandas", "pydantic", "pytest"]
    import_errors: list[str] = []
    for module_name in package_specs:
        try:
            importlib.import_module(module_name)
        except ImportError as exc:
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        ok, line = _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
        results.append(line)
        all_passed = False
    else:
        ok, line = _print_result("Required packages: all importable", True)
        results.append(line)

        from hotel_inventory.main import build_demo_hotel
        from hotel_inventory.services.matrix_service import sales_matrix

        # CHECK 3: Demo hotel declaration (160 rooms, 4 bands)
        try:
            summary = build_demo_hotel().summarize()
            if (summary.room_count, summary.price_band_count) != (160, 4):
                raise RuntimeError(
                    f"expected 160 rooms and 4 bands, got "
                    f"{summary.room_count} rooms and {summary.price_band_count} bands"
                )
            ok, line = _print_result("Demo hotel: 160 rooms, 4 price bands", True)
        except Exception as exc:
            ok, line = _print_result("Demo hotel", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 4: Exact decimal price bounds
        try:
            first_band = build_demo_hotel().price_bands[0]
            if first_band.price_range.lower != Decimal("170.01"):
                raise RuntimeError(f"lower bound is {first_band.price_range.lower}")
            ok, line = _print_result("Exact decimal prices", True)
        except Exception as exc:
            ok, line = _print_result("Exact decimal prices", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 5: Sales matrix conversion (8 x 4)
        try:
            shape = sales_matrix().shape
            if shape != (8, 4):
                raise RuntimeError(f"expected shape (8, 4), got {shape}")
            ok, line = _print_result("Sales matrix: 8 x 4", True)
        except Exception as exc:
            ok, line = _print_result("Sales matrix", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

    print(SEPARATOR_LINE)
    print(" Hotel Inventory Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

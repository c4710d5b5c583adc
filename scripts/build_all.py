#!/usr/bin/env python
"""
Build pipeline - builds the price sheet and runs the golden regression tests.

Usage:
    python scripts/build_all.py
"""
import subprocess
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from apparel_pricing.data.build_price_sheet import build_price_sheet


def main():
    print("=" * 60)
    print("APPAREL PRICING BUILD PIPELINE")
    print("=" * 60)
    print()

    print("[1/2] Building price sheet...")
    report = build_price_sheet(verbose=True)

    if report["status"] != "success":
        print("\n❌ BUILD FAILED")
        for error in report["errors"]:
            print(f"  ERROR: {error}")
        sys.exit(1)

    print()
    print("[2/2] Running golden tests...")

    test_result = subprocess.run(
        [sys.executable, '-m', 'pytest', 'tests/test_golden_cases.py', '-v', '--tb=short'],
        cwd=Path(__file__).parent.parent
    )

    if test_result.returncode != 0:
        print("\n❌ TESTS FAILED")
        sys.exit(1)

    metrics = report['metrics']
    print()
    print("=" * 60)
    print("✅ BUILD COMPLETE")
    print("=" * 60)
    print()
    print("Summary:")
    print(f"  Rows: {metrics['row_count']}")
    print(f"  Products: {metrics['product_count']}")
    print(f"  Categories: {metrics['category_count']}")
    print(f"  Price range: {metrics['price_range']['min']} - {metrics['price_range']['max']}")
    for warning in report['warnings']:
        print(f"  ⚠️ {warning}")


if __name__ == "__main__":
    main()

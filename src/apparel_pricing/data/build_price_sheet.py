"""
Price Sheet Builder - expands the price schedule into a printable matrix.

Produces one row per product type × coverage × size token with its quoted
price and category, writes it to CSV and saves a build report next to it.
"""
import pandas as pd
import json
import hashlib
from datetime import datetime
from typing import Optional

from ..config.settings import get_settings, Settings
from ..engine.categories import product_family
from ..engine.models import Coverage, ProductFamily, ProductType
from ..engine.pricing_engine import PricingEngine, get_engine
from ..engine.sizes import classify_size, known_sizes


PRICE_SHEET_COLUMNS = ['Product', 'Family', 'Coverage', 'Size', 'Tier', 'Price', 'Category']


def get_content_hash(df: pd.DataFrame) -> str:
    """Get short SHA256 hash of the sheet contents."""
    payload = df.to_csv(index=False).encode('utf-8')
    return hashlib.sha256(payload).hexdigest()[:12]


def price_matrix(engine: Optional[PricingEngine] = None) -> pd.DataFrame:
    """
    Quote every product type against every offered size.

    Flat goods have no partial coverage, so they are listed for Set only.
    """
    engine = engine or get_engine()
    rows = []
    for product in ProductType:
        family = product_family(product.value)
        coverages = list(Coverage) if family is ProductFamily.JERSEY else [Coverage.SET]
        for coverage in coverages:
            for size in known_sizes():
                quote = engine.quote(product.value, coverage, size)
                rows.append({
                    'Product': product.value,
                    'Family': family.value,
                    'Coverage': coverage.value,
                    'Size': size,
                    'Tier': classify_size(size).value,
                    'Price': quote.price,
                    'Category': quote.category,
                })
    return pd.DataFrame(rows, columns=PRICE_SHEET_COLUMNS)


def build_price_sheet(settings: Optional[Settings] = None, verbose: bool = True,
                      engine: Optional[PricingEngine] = None) -> dict:
    """
    Build the price sheet CSV and its build report.

    Args:
        settings: Optional settings override
        verbose: Print progress messages
        engine: Optional engine override (e.g. a custom price schedule)

    Returns:
        Build report dictionary
    """
    settings = settings or get_settings()

    report = {
        "timestamp": datetime.now().isoformat(),
        "status": "pending",
        "metrics": {},
        "warnings": [],
        "errors": []
    }

    try:
        sheet = price_matrix(engine)
    except Exception as e:
        msg = f"ERROR: Failed to build price matrix. {e}"
        report["errors"].append(msg)
        report["status"] = "failed"
        if verbose:
            print(msg)
        return report

    report["metrics"]["row_count"] = len(sheet)
    report["metrics"]["product_count"] = int(sheet['Product'].nunique())
    report["metrics"]["category_count"] = int(sheet['Category'].nunique())
    report["metrics"]["price_range"] = {
        "min": int(sheet['Price'].min()),
        "max": int(sheet['Price'].max()),
    }

    # Every offered product should have a price; zero means the schedule missed it
    unpriced = sheet[sheet['Price'] <= 0]
    report["metrics"]["unpriced_rows"] = len(unpriced)
    if not unpriced.empty:
        products = ", ".join(sorted(unpriced['Product'].unique()))
        report["warnings"].append(f"{len(unpriced)} rows have no price ({products})")

    report["content_hash"] = get_content_hash(sheet)

    output_path = settings.price_sheet
    output_path.parent.mkdir(parents=True, exist_ok=True)
    sheet.to_csv(output_path, index=False)
    report["output_file"] = str(output_path)
    report["status"] = "success"

    if verbose:
        print(f"PROCESS COMPLETE: {output_path} generated with {len(sheet)} rows "
              f"across {report['metrics']['product_count']} products.")

    report_path = settings.build_report
    report_path.parent.mkdir(parents=True, exist_ok=True)
    with open(report_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2)

    if verbose:
        print(f"Build report saved to: {report_path}")

    return report


if __name__ == "__main__":
    build_price_sheet()

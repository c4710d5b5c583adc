"""
Category Resolver - maps product family and size tier to a display label.
"""
from typing import Optional

from .models import ProductFamily, ProductType, SizeTier, UNKNOWN_CATEGORY


JERSEY_MARKER = "Jersey"

FLAT_GOODS = frozenset({"Tshirt", "Shorts", "Pants", "Polo Shirt", "Longsleeves", "Hoodie"})

JERSEY_CATEGORIES = {
    SizeTier.JUNIOR_SMALL: "Junior Jerseys (4-6)",
    SizeTier.JUNIOR_STANDARD: "Junior Jerseys (8-20)",
    SizeTier.ADULT_PLUS_LOW: "Adult Plus Size (2XL-4XL)",
    SizeTier.ADULT_PLUS_HIGH: "Adult Plus Size (5XL-7XL)",
}
JERSEY_DEFAULT_CATEGORY = "Adult Standard"

# The "L-XL" label on S/M/L tokens is the label customers already see on
# past orders and reports; keep it as is.
FLAT_GOODS_SUFFIXES = {
    SizeTier.ADULT_TINY: "S-M Sizes",
    SizeTier.ADULT_SMALL: "L-XL Sizes",
    SizeTier.ADULT_PLUS_LOW: "Plus Size 2XL-4XL",
    SizeTier.ADULT_PLUS_HIGH: "Plus Size 5XL-7XL",
}
FLAT_GOODS_DEFAULT_SUFFIX = "Standard"


def product_name(product_type) -> str:
    """Plain product name for a ProductType member or a stored string."""
    if not product_type:
        return ""
    known = ProductType.coerce(product_type)
    return known.value if known is not None else str(product_type)


def product_family(product_type) -> Optional[ProductFamily]:
    """
    Determine the pricing family of a product type.

    Any product containing "Jersey" is a jersey; flat goods must match the
    fixed set exactly. Returns None for anything else.
    """
    name = product_name(product_type)
    if not name:
        return None
    if JERSEY_MARKER in name:
        return ProductFamily.JERSEY
    if name in FLAT_GOODS:
        return ProductFamily.FLAT_GOODS
    return None


def resolve_category(product_type, tier: SizeTier) -> str:
    """Get the display category for a product type and size tier."""
    family = product_family(product_type)

    if family is ProductFamily.JERSEY:
        return JERSEY_CATEGORIES.get(tier, JERSEY_DEFAULT_CATEGORY)

    if family is ProductFamily.FLAT_GOODS:
        suffix = FLAT_GOODS_SUFFIXES.get(tier, FLAT_GOODS_DEFAULT_SUFFIX)
        return f"{product_name(product_type)} ({suffix})"

    return UNKNOWN_CATEGORY

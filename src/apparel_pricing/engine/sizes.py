"""
Size Classifier - normalizes raw size tokens and buckets them into tiers.

Sizes come in free-form from the order form and bulk paste: junior numeric
sizes ("4".."20"), adult letter sizes ("2XS".."7XL") and spelled-out variants
("2X-LARGE", "XSMALL"). Classification never fails; anything unrecognized is
priced as standard adult.
"""
from typing import Optional

from .models import SizeTier


JUNIOR_SMALL_SIZES = frozenset({"4", "6"})
JUNIOR_STANDARD_SIZES = frozenset({"8", "10", "12", "14", "16", "18", "20"})

PLUS_LOW_SIZES = frozenset({"2XL", "3XL", "4XL", "2X-LARGE", "3X-LARGE", "4X-LARGE"})
PLUS_HIGH_SIZES = frozenset({"5XL", "6XL", "7XL", "5X-LARGE", "6X-LARGE", "7X-LARGE"})

# Only flat goods price these separately from adult-standard
TINY_SIZES = frozenset({"2XS", "XS", "2XSMALL", "XSMALL"})
SMALL_SIZES = frozenset({"S", "M", "L", "SMALL", "MEDIUM", "LARGE"})

# Checked in order; first hit wins
_TIER_TABLE = (
    (JUNIOR_SMALL_SIZES, SizeTier.JUNIOR_SMALL),
    (JUNIOR_STANDARD_SIZES, SizeTier.JUNIOR_STANDARD),
    (PLUS_LOW_SIZES, SizeTier.ADULT_PLUS_LOW),
    (PLUS_HIGH_SIZES, SizeTier.ADULT_PLUS_HIGH),
    (TINY_SIZES, SizeTier.ADULT_TINY),
    (SMALL_SIZES, SizeTier.ADULT_SMALL),
)

# Representative tokens per tier, used for price sheets and form dropdowns
JUNIOR_SIZES = ("4", "6", "8", "10", "12", "14", "16", "18", "20")
ADULT_SIZES = ("2XS", "XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL", "5XL", "6XL", "7XL")


def normalize_size(size: Optional[str]) -> str:
    """
    Strip and uppercase a raw size token. None becomes an empty token.

    Stripping is deliberate: the storefront's price check only uppercases,
    so a padded " 3XL" there loses its plus-size surcharge, while here it
    keeps it.
    """
    if size is None:
        return ""
    return str(size).strip().upper()


def classify_size(size: Optional[str]) -> SizeTier:
    """
    Classify a raw size token into a SizeTier.

    Matching is case-insensitive. Unknown tokens fall through to
    ADULT_STANDARD rather than raising.
    """
    token = normalize_size(size)
    for sizes, tier in _TIER_TABLE:
        if token in sizes:
            return tier
    return SizeTier.ADULT_STANDARD


def known_sizes() -> tuple[str, ...]:
    """All size tokens offered in the order form, juniors first."""
    return JUNIOR_SIZES + ADULT_SIZES

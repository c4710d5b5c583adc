"""
Pricing Engine - core price and category resolution with traceability.

Resolution order for every item:
1. Normalize the size token and classify it into a size tier
2. Resolve the product family (jersey or flat goods)
3. Pick the base price for the family and tier (coverage matters only for
   junior jerseys)
4. Add the plus-size surcharge for 2XL-4XL / 5XL-7XL
5. Attach the display category

The contract is total: unrecognized product types quote as price 0 with
category "Unknown" so an order can always be recorded.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .models import Coverage, ProductFamily, Quote, SizeTier, TraceStep, UNKNOWN_CATEGORY
from .sizes import classify_size, normalize_size
from .categories import product_family, product_name, resolve_category


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceSchedule:
    """Whole-unit prices in local currency."""

    # Jerseys
    junior_small_set: int = 250
    junior_small_partial: int = 150
    junior_standard_set: int = 380
    junior_standard_partial: int = 200
    jersey_adult_base: int = 280

    # T-shirts, shorts, pants, polo, longsleeves, hoodies
    flat_tiny: int = 280
    flat_small: int = 300
    flat_base: int = 320

    # Plus-size surcharges, shared by both families
    plus_low_surcharge: int = 30
    plus_high_surcharge: int = 50

    def surcharge(self, tier: SizeTier) -> int:
        if not tier.is_plus:
            return 0
        if tier is SizeTier.ADULT_PLUS_LOW:
            return self.plus_low_surcharge
        return self.plus_high_surcharge


DEFAULT_SCHEDULE = PriceSchedule()

UNKNOWN_QUOTE = Quote(price=0, category=UNKNOWN_CATEGORY)


class PricingEngine:
    """
    Pure pricing engine: (product type, coverage, size) → Quote.

    Holds only an immutable PriceSchedule, so a single instance can be
    shared freely across threads and requests.
    """

    def __init__(self, schedule: Optional[PriceSchedule] = None):
        self.schedule = schedule or DEFAULT_SCHEDULE

    def quote(self, product_type: Optional[str], coverage=Coverage.SET, size: Optional[str] = "") -> Quote:
        """
        Quote a single item.

        Args:
            product_type: ProductType member or product name, e.g. "Basketball Jersey"
            coverage: Coverage member or its string value ("Set", "Upper", "Lower")
            size: Raw size token; matched case-insensitively

        Returns:
            Quote with price and display category
        """
        quote, _ = self._resolve(product_type, coverage, size, trace=None)
        return quote

    def price(self, product_type: Optional[str], coverage=Coverage.SET, size: Optional[str] = "") -> int:
        """Numeric price only, for call sites that do not need the category."""
        return self.quote(product_type, coverage, size).price

    def quote_with_trace(self, product_type: Optional[str], coverage=Coverage.SET,
                         size: Optional[str] = "") -> tuple[Quote, list[TraceStep]]:
        """
        Quote with trace of resolution steps.

        Returns (quote, trace_steps).
        """
        trace: list[TraceStep] = []
        return self._resolve(product_type, coverage, size, trace=trace)

    def _resolve(self, product_type, coverage, size, trace: Optional[list]) -> tuple[Quote, list[TraceStep]]:
        def add(step: str, description: str, value=None):
            if trace is not None:
                trace.append(TraceStep(step=step, description=description,
                                       value=None if value is None else str(value)))

        token = normalize_size(size)
        tier = classify_size(token)
        add("Size", f"Normalized size '{size}'", token or "(blank)")
        add("Size Tier", "Classified size", tier.value)

        family = product_family(product_type)
        if family is None:
            logger.warning("Unrecognized product type %r; quoting as Unknown", product_name(product_type))
            add("Product Family", f"No pricing family for '{product_name(product_type)}'", None)
            add("Fallback", "Unknown product priced at zero", UNKNOWN_QUOTE.price)
            return UNKNOWN_QUOTE, trace or []

        add("Product Family", f"'{product_name(product_type)}' priced as", family.value)

        full_set = self._is_full_set(coverage)
        if family is ProductFamily.JERSEY:
            base = self._jersey_base(tier, full_set)
            add("Coverage", "Full set" if full_set else "Partial (upper/lower)", coverage_label(coverage))
        else:
            base = self._flat_goods_base(tier)
            add("Coverage", "Not a pricing input for flat goods", None)

        add("Base Price", f"Base for {tier.value}", base)

        surcharge = self.schedule.surcharge(tier)
        if surcharge:
            add("Surcharge", "Plus-size surcharge", f"+{surcharge}")

        quote = Quote(price=base + surcharge, category=resolve_category(product_type, tier))
        add("Category", "Display category", quote.category)
        add("Price", "Final price", quote.price)
        return quote, trace or []

    @staticmethod
    def _is_full_set(coverage) -> bool:
        # Anything other than a full set (including unrecognized values) is partial
        parsed = Coverage.coerce(coverage)
        return parsed is not None and parsed.is_full

    def _jersey_base(self, tier: SizeTier, full_set: bool) -> int:
        s = self.schedule
        if not tier.is_junior:
            return s.jersey_adult_base
        if tier is SizeTier.JUNIOR_SMALL:
            return s.junior_small_set if full_set else s.junior_small_partial
        return s.junior_standard_set if full_set else s.junior_standard_partial

    def _flat_goods_base(self, tier: SizeTier) -> int:
        s = self.schedule
        if tier is SizeTier.ADULT_TINY:
            return s.flat_tiny
        if tier is SizeTier.ADULT_SMALL:
            return s.flat_small
        return s.flat_base


def coverage_label(coverage) -> str:
    parsed = Coverage.coerce(coverage)
    return parsed.value if parsed is not None else str(coverage)


_default_engine = PricingEngine()


def get_engine() -> PricingEngine:
    """Get the shared default engine."""
    return _default_engine


def quote(product_type: Optional[str], coverage=Coverage.SET, size: Optional[str] = "") -> Quote:
    """Quote an item with the default price schedule."""
    return _default_engine.quote(product_type, coverage, size)


def price(product_type: Optional[str], coverage=Coverage.SET, size: Optional[str] = "") -> int:
    """Price an item with the default price schedule."""
    return _default_engine.price(product_type, coverage, size)

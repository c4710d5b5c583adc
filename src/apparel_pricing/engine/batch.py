"""
Batch Aggregator - totals and per-customer grouping of priced order lines.
"""
from typing import Iterable, Optional

from .models import BatchSummary, CustomerGroup, OrderLine
from .pricing_engine import PricingEngine


def customer_key(item: OrderLine) -> str:
    """
    Key identifying the customer an item belongs to.

    Uses the stored customer id when there is one; cart items that have not
    been saved yet are keyed on name and phone.
    """
    if item.customer_id:
        return str(item.customer_id)
    return f"{item.customer_name}-{item.customer_phone or ''}"


def effective_price(item: OrderLine, engine: Optional[PricingEngine] = None) -> int:
    """
    Price to bill for an item.

    The price snapshotted when the item was added wins. Legacy rows without
    one are recomputed when an engine is given, otherwise count as zero.
    """
    if item.price:
        return int(item.price)
    if engine is None:
        return 0
    return engine.price(item.product_type, item.coverage, item.size)


def summarize_batch(items: Iterable[OrderLine], engine: Optional[PricingEngine] = None) -> BatchSummary:
    """
    Single pass over the items: overall total plus customer groups.

    Customers appear in the order they are first seen; items keep their
    insertion order within a group.
    """
    summary = BatchSummary(total=0, item_count=0)

    for item in items:
        amount = effective_price(item, engine)
        key = customer_key(item)

        group = summary.groups.get(key)
        if group is None:
            group = CustomerGroup(key=key, customer_name=item.customer_name)
            summary.groups[key] = group

        group.items.append(item)
        group.subtotal += amount
        summary.total += amount
        summary.item_count += 1

    return summary

"""
Order-entry batch: the cart a customer or reseller fills before submitting.

Customer context is held on the batch itself and passed in explicitly; each
added item snapshots its quoted price so later price-list changes do not
alter what the customer was shown.
"""
import logging
import uuid
from typing import Iterable, Iterator, Optional

from ..engine.batch import summarize_batch
from ..engine.models import BatchSummary, OrderLine, now_timestamp
from ..engine.pricing_engine import PricingEngine, get_engine
from .status import OrderStatus
from .validation import CustomerInput, OrderItemInput


logger = logging.getLogger(__name__)


class Batch:
    """A batch of order items for one or more customers."""

    def __init__(self, customer: Optional[CustomerInput] = None, engine: Optional[PricingEngine] = None):
        self.engine = engine or get_engine()
        self.customer = customer
        self._items: list[OrderLine] = []

    def set_customer(self, customer: CustomerInput):
        """Switch the customer that subsequently added items belong to."""
        self.customer = customer

    def add(self, item: OrderItemInput) -> OrderLine:
        """
        Add an item for the current customer, snapshotting its price.

        Raises:
            ValueError: no customer has been set yet
        """
        if self.customer is None or not self.customer.team_name.strip():
            raise ValueError("Please enter a customer name before adding items")

        quote = self.engine.quote(item.product_type.value, item.coverage, item.size)
        if not quote.recognized:
            logger.warning("Item for %s has no price (product %s)", self.customer.team_name, item.product_type.value)

        line = OrderLine(
            id=str(uuid.uuid4()),
            customer_id=self.customer.customer_id,
            customer_name=self.customer.team_name,
            customer_phone=self.customer.phone,
            customer_fb=self.customer.fb_link,
            product_type=item.product_type.value,
            coverage=item.coverage.value,
            size=item.size,
            price=quote.price,
            player_name_back=item.player_name_back,
            player_name_front=item.player_name_front,
            jersey_number=item.jersey_number,
            style=item.style,
            status=OrderStatus.PENDING.value,
            created_at=now_timestamp(),
        )
        self._items.append(line)
        logger.debug("Added %s %s (%s) for %s at %s", line.product_type, line.size,
                     line.coverage, line.customer_name, line.price)
        return line

    def add_many(self, items: Iterable[OrderItemInput]) -> list[OrderLine]:
        """Bulk add; all items go to the current customer."""
        return [self.add(item) for item in items]

    def remove(self, item_id: str) -> OrderLine:
        """Remove an item by id. Raises KeyError if it is not in the batch."""
        for index, line in enumerate(self._items):
            if line.id == item_id:
                return self._items.pop(index)
        raise KeyError(item_id)

    def clear(self):
        self._items.clear()

    @property
    def items(self) -> list[OrderLine]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(self._items)

    def summary(self) -> BatchSummary:
        """Total and per-customer grouping of the batch."""
        return summarize_batch(self._items)

    def to_order_rows(self) -> list[dict]:
        """Rows for the order book, one per item, all pending with the snapshotted price."""
        rows = []
        for line in self._items:
            row = line.to_record()
            row["status"] = OrderStatus.PENDING.value
            rows.append(row)
        return rows

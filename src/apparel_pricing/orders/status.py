"""
Order Status Pipeline - production stages every item moves through.

pending → in_production → shipped → completed
"""
import logging
from enum import Enum
from typing import Iterable, Optional

from ..engine.models import OrderLine


logger = logging.getLogger(__name__)


class OrderStatus(str, Enum):
    """Production stage of a single order item, in pipeline order."""
    PENDING = "pending"
    IN_PRODUCTION = "in_production"
    SHIPPED = "shipped"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @classmethod
    def parse(cls, value) -> 'OrderStatus':
        """Parse a status name. Raises ValueError for unknown names."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown order status '{value}'. Expected one of: {', '.join(s.value for s in cls)}"
            ) from None


STATUS_LABELS = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.IN_PRODUCTION: "In Production",
    OrderStatus.SHIPPED: "Shipped",
    OrderStatus.COMPLETED: "Completed",
}

PIPELINE = tuple(OrderStatus)


class Role(str, Enum):
    """Who is acting on an order."""
    ADMIN = "admin"
    RESELLER = "reseller"
    CUSTOMER = "customer"


ALL = "all"


def next_status(status) -> Optional[OrderStatus]:
    """Next stage in the pipeline, or None once completed."""
    current = OrderStatus.parse(status)
    index = PIPELINE.index(current)
    if index + 1 < len(PIPELINE):
        return PIPELINE[index + 1]
    return None


def transition(order: OrderLine, new_status, role=Role.ADMIN) -> OrderLine:
    """
    Move an order item to a new status.

    Admins may set any stage (including moving an item back); nobody else
    may change production status.

    Raises:
        PermissionError: role is not admin
        ValueError: unknown status name
    """
    target = OrderStatus.parse(new_status)
    if Role(role) is not Role.ADMIN:
        raise PermissionError(f"Role '{Role(role).value}' cannot change order status")

    previous = order.status
    order.status = target.value
    logger.info("Order %s status %s → %s", order.id or "(unsaved)", previous, target.value)
    return order


def can_delete(order: OrderLine) -> bool:
    """Resellers may only delete items that have not entered production."""
    return order.status == OrderStatus.PENDING.value


def status_counts(orders: Iterable[OrderLine]) -> dict:
    """Item counts per status plus the overall total."""
    counts = {"total": 0}
    counts.update({s.value: 0 for s in OrderStatus})
    for order in orders:
        counts["total"] += 1
        if order.status in counts:
            counts[order.status] += 1
    return counts


def filter_orders(orders: Iterable[OrderLine], search: str = "", status: str = ALL,
                  customer: str = ALL) -> list[OrderLine]:
    """
    Dashboard filter over order items.

    search matches player names and team name case-insensitively, and the
    jersey number as a substring. status and customer must match exactly;
    "all" turns a filter off.
    """
    query = (search or "").strip().lower()
    results = []
    for order in orders:
        if query:
            haystack = (
                order.player_name_back or "",
                order.player_name_front or "",
                order.customer_name or "",
            )
            matches_search = (
                any(query in field.lower() for field in haystack)
                or query in (order.jersey_number or "")
            )
            if not matches_search:
                continue

        if status != ALL and order.status != status:
            continue
        if customer != ALL and order.customer_name != customer:
            continue

        results.append(order)
    return results


def unique_customers(orders: Iterable[OrderLine]) -> list[str]:
    """Sorted distinct team names appearing in the orders."""
    return sorted({o.customer_name for o in orders if o.customer_name})

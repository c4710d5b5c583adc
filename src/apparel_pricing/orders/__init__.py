"""Orders subpackage - order entry, validation and production status."""
from .batch import Batch
from .status import OrderStatus, Role, next_status, transition, can_delete, status_counts, filter_orders, unique_customers
from .validation import CustomerInput, OrderItemInput, validate_customer, validate_item

__all__ = [
    'Batch',
    'OrderStatus', 'Role', 'next_status', 'transition', 'can_delete',
    'status_counts', 'filter_orders', 'unique_customers',
    'CustomerInput', 'OrderItemInput', 'validate_customer', 'validate_item',
]

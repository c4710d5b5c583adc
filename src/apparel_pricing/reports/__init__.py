"""Reports subpackage - customer balances and payment totals."""
from .ledger import Transaction, TransactionStatus, customer_statement, account_totals, orders_frame

__all__ = ['Transaction', 'TransactionStatus', 'customer_statement', 'account_totals', 'orders_frame']

"""
Customer Ledger - billed vs. paid balances per customer.

Works on already-fetched customer, order and transaction rows; billing uses
each order's snapshotted price and falls back to recomputing it for legacy
rows that never stored one.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import pandas as pd

from ..engine.batch import effective_price
from ..engine.models import OrderLine
from ..engine.pricing_engine import PricingEngine, get_engine


class TransactionStatus(str, Enum):
    """Review state of a reported payment (deposit slip)."""
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


@dataclass
class Transaction:
    """A payment reported against a customer's balance."""
    customer_id: str
    amount: float
    payment_method: str
    reference_number: Optional[str] = None
    status: str = TransactionStatus.PENDING.value
    id: Optional[str] = None

    @classmethod
    def from_record(cls, row: dict) -> 'Transaction':
        return cls(
            id=row.get('id'),
            customer_id=str(row.get('customer_id') or ''),
            amount=float(row.get('amount') or 0),
            payment_method=row.get('payment_method') or '',
            reference_number=row.get('reference_number'),
            status=row.get('status') or TransactionStatus.PENDING.value,
        )


STATEMENT_COLUMNS = ['team_name', 'total_items', 'total_bill', 'total_paid', 'pending_payments', 'balance']


def orders_frame(orders: Iterable[OrderLine], engine: Optional[PricingEngine] = None) -> pd.DataFrame:
    """Order lines as a DataFrame with the price each one bills at."""
    engine = engine or get_engine()
    rows = []
    for order in orders:
        rows.append({
            'id': order.id,
            'customer_id': order.customer_id,
            'customer_name': order.customer_name,
            'product_type': order.product_type,
            'coverage': order.coverage,
            'size': order.size,
            'status': order.status,
            'stored_price': order.price,
            'effective_price': effective_price(order, engine),
        })
    columns = ['id', 'customer_id', 'customer_name', 'product_type', 'coverage',
               'size', 'status', 'stored_price', 'effective_price']
    return pd.DataFrame(rows, columns=columns)


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    rows = [
        {'id': t.id, 'customer_id': t.customer_id, 'amount': float(t.amount), 'status': t.status}
        for t in transactions
    ]
    return pd.DataFrame(rows, columns=['id', 'customer_id', 'amount', 'status'])


def _sum_by_customer(df: pd.DataFrame, value_col: str) -> pd.Series:
    if df.empty:
        return pd.Series(dtype=float)
    return df.groupby('customer_id')[value_col].sum()


def customer_statement(customers: Iterable[dict], orders: Iterable[OrderLine],
                       transactions: Iterable[Transaction],
                       engine: Optional[PricingEngine] = None) -> pd.DataFrame:
    """
    Per-customer statement.

    Args:
        customers: Customer rows with at least 'id' and 'team_name'
        orders: Order lines; those for unknown customers are ignored
        transactions: Reported payments; only verified ones count as paid

    Returns:
        DataFrame indexed by customer id with team_name, total_items,
        total_bill, total_paid, pending_payments and balance columns
    """
    customer_df = pd.DataFrame(
        [{'customer_id': str(c['id']), 'team_name': c.get('team_name', '')} for c in customers],
        columns=['customer_id', 'team_name'],
    ).drop_duplicates('customer_id').set_index('customer_id')

    odf = orders_frame(orders, engine)
    odf = odf[odf['customer_id'].notna()].copy()
    odf['customer_id'] = odf['customer_id'].astype(str)

    tdf = transactions_frame(transactions)
    verified = tdf[tdf['status'] == TransactionStatus.VERIFIED.value]
    pending = tdf[tdf['status'] == TransactionStatus.PENDING.value]

    statement = customer_df.copy()
    statement['total_items'] = (
        odf.groupby('customer_id').size() if not odf.empty else pd.Series(dtype=int)
    )
    statement['total_bill'] = _sum_by_customer(odf, 'effective_price')
    statement['total_paid'] = _sum_by_customer(verified, 'amount')
    statement['pending_payments'] = _sum_by_customer(pending, 'amount')

    statement = statement.fillna({'total_items': 0, 'total_bill': 0, 'total_paid': 0, 'pending_payments': 0})
    statement['total_items'] = statement['total_items'].astype(int)
    for col in ('total_bill', 'total_paid', 'pending_payments'):
        statement[col] = statement[col].astype(float)
    statement['balance'] = statement['total_bill'] - statement['total_paid']

    return statement[STATEMENT_COLUMNS]


def account_totals(orders: Iterable[OrderLine], transactions: Iterable[Transaction],
                   engine: Optional[PricingEngine] = None) -> dict:
    """Totals across every order and payment visible to the caller."""
    odf = orders_frame(orders, engine)
    tdf = transactions_frame(transactions)

    total_bill = float(odf['effective_price'].sum()) if not odf.empty else 0.0
    total_paid = float(tdf.loc[tdf['status'] == TransactionStatus.VERIFIED.value, 'amount'].sum())
    total_pending = float(tdf.loc[tdf['status'] == TransactionStatus.PENDING.value, 'amount'].sum())

    return {
        'total_bill': total_bill,
        'total_paid': total_paid,
        'total_pending': total_pending,
        'balance': total_bill - total_paid,
    }

import pytest

from apparel_pricing.engine import OrderLine
from apparel_pricing.reports import Transaction, account_totals, customer_statement, orders_frame


CUSTOMERS = [
    {"id": "c-1", "team_name": "Falcons"},
    {"id": "c-2", "team_name": "Hawks"},
    {"id": "c-3", "team_name": "Eagles"},
]


def order(customer_id, price=None, size="M", product="Basketball Jersey"):
    return OrderLine(customer_name="", customer_id=customer_id, product_type=product, size=size, price=price)


@pytest.fixture
def orders():
    return [
        order("c-1", 280),
        order("c-1", None, size="3XL"),  # legacy row, recomputed at 310
        order("c-2", 250),
        order("c-9", 999),  # unknown customer
    ]


@pytest.fixture
def transactions():
    return [
        Transaction(customer_id="c-1", amount=300, payment_method="GCash", status="verified"),
        Transaction(customer_id="c-1", amount=100, payment_method="GCash", status="pending"),
        Transaction(customer_id="c-2", amount=50, payment_method="Bank", status="rejected"),
        Transaction(customer_id="c-9", amount=500, payment_method="Bank", status="verified"),
    ]


def test_orders_frame_effective_price(orders):
    df = orders_frame(orders)
    assert df['effective_price'].tolist() == [280, 310, 250, 999]
    assert df['stored_price'].isna().sum() == 1


def test_customer_statement(orders, transactions):
    statement = customer_statement(CUSTOMERS, orders, transactions)

    assert list(statement.index) == ["c-1", "c-2", "c-3"]
    falcons = statement.loc["c-1"]
    assert falcons['total_items'] == 2
    assert falcons['total_bill'] == 590
    assert falcons['total_paid'] == 300
    assert falcons['pending_payments'] == 100
    assert falcons['balance'] == 290

    hawks = statement.loc["c-2"]
    assert hawks['total_paid'] == 0  # rejected payments do not count
    assert hawks['balance'] == 250


def test_customer_without_activity_has_zeros(orders, transactions):
    eagles = customer_statement(CUSTOMERS, orders, transactions).loc["c-3"]
    assert eagles['total_items'] == 0
    assert eagles['total_bill'] == 0
    assert eagles['balance'] == 0


def test_empty_statement():
    statement = customer_statement([], [], [])
    assert statement.empty
    assert list(statement.columns) == ['team_name', 'total_items', 'total_bill',
                                       'total_paid', 'pending_payments', 'balance']


def test_account_totals(orders, transactions):
    totals = account_totals(orders, transactions)
    assert totals == {
        'total_bill': 280 + 310 + 250 + 999,
        'total_paid': 800,
        'total_pending': 100,
        'balance': 280 + 310 + 250 + 999 - 800,
    }


def test_account_totals_empty():
    assert account_totals([], []) == {'total_bill': 0.0, 'total_paid': 0.0, 'total_pending': 0.0, 'balance': 0.0}


def test_transaction_from_record():
    tx = Transaction.from_record({"customer_id": "c-1", "amount": "1250.50", "payment_method": "GCash"})
    assert tx.amount == 1250.50
    assert tx.status == "pending"

import pytest
from pydantic import ValidationError

from apparel_pricing.engine import Coverage, OrderLine, ProductType
from apparel_pricing.orders import (
    OrderStatus, Role, can_delete, filter_orders, next_status, status_counts,
    transition, unique_customers, validate_customer, validate_item,
)


def order(status="pending", team="Falcons", back="REYES", front=None, number="7"):
    return OrderLine(customer_name=team, product_type="Basketball Jersey", size="M", price=280,
                     status=status, player_name_back=back, player_name_front=front, jersey_number=number)


# Status pipeline

def test_pipeline_order_and_labels():
    assert [s.value for s in OrderStatus] == ["pending", "in_production", "shipped", "completed"]
    assert OrderStatus.IN_PRODUCTION.label == "In Production"


def test_next_status():
    assert next_status("pending") is OrderStatus.IN_PRODUCTION
    assert next_status(OrderStatus.SHIPPED) is OrderStatus.COMPLETED
    assert next_status("completed") is None


def test_parse_unknown_status():
    with pytest.raises(ValueError):
        OrderStatus.parse("lost")
    assert OrderStatus.parse(" Shipped ") is OrderStatus.SHIPPED


def test_admin_can_set_any_status():
    o = order(status="completed")
    transition(o, "in_production", Role.ADMIN)
    assert o.status == "in_production"


def test_non_admin_cannot_change_status():
    o = order()
    with pytest.raises(PermissionError):
        transition(o, "shipped", "reseller")
    assert o.status == "pending"


def test_can_delete_only_pending():
    assert can_delete(order("pending"))
    assert not can_delete(order("in_production"))


def test_status_counts():
    counts = status_counts([order("pending"), order("pending"), order("shipped"), order("completed")])
    assert counts == {"total": 4, "pending": 2, "in_production": 0, "shipped": 1, "completed": 1}


def test_filter_orders():
    orders = [
        order(team="Falcons", back="REYES", number="7"),
        order(team="Hawks", back="SANTOS", front="Migs", number="23", status="shipped"),
        order(team="Eagles", back="CRUZ", number="11"),
    ]
    assert filter_orders(orders) == orders
    assert filter_orders(orders, search="hawk") == [orders[1]]
    assert filter_orders(orders, search="migs") == [orders[1]]
    assert filter_orders(orders, search="1") == [orders[2]]
    assert filter_orders(orders, status="shipped") == [orders[1]]
    assert filter_orders(orders, customer="Eagles") == [orders[2]]
    assert filter_orders(orders, search="reyes", status="shipped") == []


def test_unique_customers_sorted():
    assert unique_customers([order(team="Hawks"), order(team="Eagles"), order(team="Hawks")]) == ["Eagles", "Hawks"]


# Validation

def test_customer_validation_trims_and_blanks():
    customer = validate_customer({"team_name": "  Falcons  ", "fb_link": "", "phone": "  "})
    assert customer.team_name == "Falcons"
    assert customer.fb_link is None
    assert customer.phone is None


@pytest.mark.parametrize("phone", ["09171234567", "0917 123 4567", "+63 917-123-4567"])
def test_valid_ph_phones(phone):
    assert validate_customer({"team_name": "A", "phone": phone}).phone == phone.strip()


@pytest.mark.parametrize("phone", ["12345", "0817123456", "+1 555 123 4567"])
def test_invalid_phones(phone):
    with pytest.raises(ValidationError):
        validate_customer({"team_name": "A", "phone": phone})


@pytest.mark.parametrize("link", ["https://www.facebook.com/falcons.team", "fb.com/falcons", "falcons.team"])
def test_valid_fb_links(link):
    assert validate_customer({"team_name": "A", "fb_link": link}).fb_link == link


def test_invalid_fb_link():
    with pytest.raises(ValidationError):
        validate_customer({"team_name": "A", "fb_link": "https://example.com/falcons"})


def test_team_name_required():
    with pytest.raises(ValidationError):
        validate_customer({"team_name": "   "})
    with pytest.raises(ValidationError):
        validate_customer({"team_name": "x" * 201})


def test_item_validation():
    item = validate_item({
        "player_name_back": " REYES ", "jersey_number": "7", "size": "M",
        "style": "Polydex", "product_type": "Hoodie", "coverage": "upper",
    })
    assert item.player_name_back == "REYES"
    assert item.product_type is ProductType.HOODIE
    assert item.coverage is Coverage.UPPER
    assert item.player_name_front is None


def test_item_defaults_to_full_set():
    item = validate_item({"player_name_back": "A", "jersey_number": "1", "size": "M",
                          "style": "Spandex", "product_type": "Tshirt"})
    assert item.coverage is Coverage.SET


@pytest.mark.parametrize("overrides", [
    {"product_type": "Jacket"},
    {"coverage": "Sleeves"},
    {"jersey_number": ""},
    {"jersey_number": "12345678901"},
    {"player_name_back": ""},
    {"size": ""},
])
def test_item_validation_errors(overrides):
    data = {"player_name_back": "A", "jersey_number": "1", "size": "M",
            "style": "Spandex", "product_type": "Tshirt"}
    data.update(overrides)
    with pytest.raises(ValidationError):
        validate_item(data)

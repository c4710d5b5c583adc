"""
Data models for the pricing engine.

Uses dataclasses and str-valued enums for structured, type-safe data
representation that still serializes as the plain strings stored upstream.
"""
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Optional


class ProductType(str, Enum):
    """Apparel categories offered in the order form."""
    BASKETBALL_JERSEY = "Basketball Jersey"
    VOLLEYBALL_JERSEY = "Volleyball Jersey"
    ESPORTS_JERSEY = "Esports Jersey"
    TSHIRT = "Tshirt"
    SHORTS = "Shorts"
    HOODIE = "Hoodie"
    LONGSLEEVES = "Longsleeves"
    POLO_SHIRT = "Polo Shirt"
    PANTS = "Pants"

    @classmethod
    def coerce(cls, value) -> Optional['ProductType']:
        """Return the matching member, or None for anything outside the set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ProductFamily(str, Enum):
    """Pricing family a product type belongs to."""
    JERSEY = "jersey"
    FLAT_GOODS = "flat_goods"


class Coverage(str, Enum):
    """Whether an item is a full Set or only the Upper/Lower piece."""
    SET = "Set"
    UPPER = "Upper"
    LOWER = "Lower"

    @property
    def is_full(self) -> bool:
        return self is Coverage.SET

    @classmethod
    def coerce(cls, value) -> Optional['Coverage']:
        """
        Map a loose coverage value onto the enum.

        Missing values (None or blank) mean a full Set, matching how legacy
        order rows without an item type are displayed. Unrecognized strings
        return None.

        Matching is case-insensitive on purpose, so "set" is a full Set.
        The storefront's own price check only accepts the exact "Set" and
        quotes any other spelling as a partial piece (150 instead of 250 for
        a junior 4-6 jersey).
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.SET
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class SizeTier(str, Enum):
    """Internal size bucket used to select a price and category."""
    JUNIOR_SMALL = "junior_small"
    JUNIOR_STANDARD = "junior_standard"
    ADULT_TINY = "adult_tiny"
    ADULT_SMALL = "adult_small"
    ADULT_STANDARD = "adult_standard"
    ADULT_PLUS_LOW = "adult_plus_low"
    ADULT_PLUS_HIGH = "adult_plus_high"

    @property
    def is_junior(self) -> bool:
        return self in (SizeTier.JUNIOR_SMALL, SizeTier.JUNIOR_STANDARD)

    @property
    def is_plus(self) -> bool:
        return self in (SizeTier.ADULT_PLUS_LOW, SizeTier.ADULT_PLUS_HIGH)


UNKNOWN_CATEGORY = "Unknown"


@dataclass(frozen=True)
class Quote:
    """Price and display category for one order item."""
    price: int
    category: str

    @property
    def recognized(self) -> bool:
        """False when the product type matched no pricing family."""
        return self.category != UNKNOWN_CATEGORY

    def to_dict(self) -> dict:
        return {"price": self.price, "category": self.category}


@dataclass
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


def format_trace(trace: list[TraceStep]) -> str:
    """Get human-readable trace as formatted text."""
    lines = []
    for t in trace:
        if t.value:
            lines.append(f"→ {t.step}: {t.description} = {t.value}")
        else:
            lines.append(f"→ {t.step}: {t.description}")
    return "\n".join(lines)


@dataclass
class OrderLine:
    """A single item of a batch order, as held in the cart or fetched back."""
    customer_name: str
    product_type: str
    size: str
    coverage: Optional[str] = Coverage.SET.value
    price: Optional[int] = None  # Snapshot taken when the item was added

    id: Optional[str] = None
    customer_id: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_fb: Optional[str] = None

    player_name_back: str = ""
    player_name_front: Optional[str] = None
    jersey_number: str = ""
    style: str = ""
    status: str = "pending"
    created_at: Optional[str] = None

    @classmethod
    def from_record(cls, row: dict) -> 'OrderLine':
        """
        Build an OrderLine from a database-shaped order row.

        Accepts both the flat cart shape (customer_name, coverage) and the
        stored shape (item_type, nested "customers" object with team_name,
        contact_phone, fb_link).
        """
        customer = row.get('customers') or {}
        price = row.get('price')
        return cls(
            id=row.get('id'),
            customer_id=row.get('customer_id') or customer.get('id'),
            customer_name=row.get('customer_name') or customer.get('team_name') or "",
            customer_phone=row.get('customer_phone') or customer.get('contact_phone'),
            customer_fb=row.get('customer_fb') or customer.get('fb_link'),
            product_type=row.get('product_type', ''),
            coverage=row.get('coverage') or row.get('item_type') or Coverage.SET.value,
            size=row.get('size', ''),
            price=int(float(price)) if price not in (None, '') else None,
            player_name_back=row.get('player_name_back') or "",
            player_name_front=row.get('player_name_front'),
            jersey_number=str(row.get('jersey_number') or ""),
            style=row.get('style') or "",
            status=row.get('status') or "pending",
            created_at=row.get('created_at'),
        )

    def to_record(self) -> dict:
        """Convert to the flat dict shape the persistence layer stores."""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "player_name_front": self.player_name_front,
            "player_name_back": self.player_name_back,
            "jersey_number": self.jersey_number,
            "size": self.size,
            "style": self.style,
            "product_type": self.product_type,
            "item_type": self.coverage,
            "price": self.price,
            "status": self.status,
        }

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CustomerGroup:
    """Items of one customer within a batch, in insertion order."""
    key: str
    customer_name: str
    items: list[OrderLine] = field(default_factory=list)
    subtotal: int = 0


@dataclass
class BatchSummary:
    """Totals and per-customer grouping of a batch of order lines."""
    total: int
    item_count: int
    groups: dict[str, CustomerGroup] = field(default_factory=dict)

    @property
    def customer_count(self) -> int:
        return len(self.groups)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "item_count": self.item_count,
            "customer_count": self.customer_count,
            "groups": [
                {
                    "key": g.key,
                    "customer_name": g.customer_name,
                    "subtotal": g.subtotal,
                    "items": [item.to_dict() for item in g.items],
                }
                for g in self.groups.values()
            ],
        }


def now_timestamp() -> str:
    return datetime.now().isoformat()

"""
Validation models for customer and order input data.

Enforces format, length and character restrictions before anything reaches
the order book.
"""
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..engine.models import Coverage, ProductType


FB_LINK_PATTERN = re.compile(r"^(https?://)?(www\.)?(facebook\.com|fb\.com|m\.facebook\.com)/.+", re.IGNORECASE)
FB_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+$")
PH_PHONE_PATTERN = re.compile(r"^(09|\+639)\d{9}$")


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class CustomerInput(BaseModel):
    """Customer / team details entered once per batch."""
    customer_id: Optional[str] = None
    team_name: str = Field(min_length=1, max_length=200)
    fb_link: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = Field(default=None, max_length=30)

    @field_validator('team_name', mode='before')
    @classmethod
    def strip_team_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('customer_id', 'fb_link', 'phone', mode='before')
    @classmethod
    def blank_optional(cls, v):
        return _blank_to_none(v)

    @field_validator('fb_link')
    @classmethod
    def check_fb_link(cls, v):
        if v is None:
            return v
        if FB_LINK_PATTERN.match(v) or FB_USERNAME_PATTERN.match(v):
            return v
        raise ValueError("Please enter a valid Facebook profile link or username")

    @field_validator('phone')
    @classmethod
    def check_phone(cls, v):
        if v is None:
            return v
        if not PH_PHONE_PATTERN.match(re.sub(r"[\s-]", "", v)):
            raise ValueError("Please enter a valid PH phone number (e.g., 09XX XXX XXXX)")
        return v


class OrderItemInput(BaseModel):
    """A single garment line entered in the order form."""
    player_name_back: str = Field(min_length=1, max_length=100)
    player_name_front: Optional[str] = Field(default=None, max_length=100)
    jersey_number: str = Field(min_length=1, max_length=10)
    size: str = Field(min_length=1)
    style: str = Field(min_length=1)
    product_type: ProductType
    coverage: Coverage = Coverage.SET

    @field_validator('player_name_back', 'jersey_number', mode='before')
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('player_name_front', mode='before')
    @classmethod
    def blank_front(cls, v):
        return _blank_to_none(v)

    @field_validator('coverage', mode='before')
    @classmethod
    def parse_coverage(cls, v):
        parsed = Coverage.coerce(v)
        if parsed is None:
            raise ValueError(f"Coverage must be one of: {', '.join(c.value for c in Coverage)}")
        return parsed


def validate_customer(data: dict) -> CustomerInput:
    """Validate raw customer data. Raises pydantic.ValidationError."""
    return CustomerInput.model_validate(data)


def validate_item(data: dict) -> OrderItemInput:
    """Validate a raw order item. Raises pydantic.ValidationError."""
    return OrderItemInput.model_validate(data)

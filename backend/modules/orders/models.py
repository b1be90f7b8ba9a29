"""
Orders module data models.

Payment itself happens elsewhere; orders only record whether they are paid.
"""

from typing import Any, Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import Document


class OrderLine(BaseModel):
    """One menu item in an order, with the options the customer picked."""

    menu_item_id: Optional[str] = None
    name: str
    price: float = Field(default=0, ge=0)
    quantity: int = Field(default=1, ge=1)
    size: Optional[dict[str, Any]] = None
    extras: list[dict[str, Any]] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class Order(Document):
    """
    A stored order.

    `user_email` points at UserProfile.email by value; it is not a
    foreign key. Items are kept as written.
    """

    user_email: Optional[str] = Field(None, description="Email of the customer")
    items: list[Any] = Field(default_factory=list, description="Ordered items")
    paid: bool = Field(default=False, description="Whether payment completed")


class OrderCreate(BaseModel):
    """Fields for a new order."""

    user_email: EmailStr
    items: list[OrderLine] = Field(default_factory=list)
    paid: bool = False
    phone: Optional[str] = None
    street_address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    model_config = {"extra": "allow"}


class OrderUpdate(BaseModel):
    """Partial order update, typically the paid flag or delivery details."""

    paid: Optional[bool] = None
    items: Optional[list[OrderLine]] = None
    phone: Optional[str] = None
    street_address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    model_config = {"extra": "allow"}

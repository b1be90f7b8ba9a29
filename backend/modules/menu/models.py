"""
Menu module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import Document


class MenuItemOption(BaseModel):
    """A priced variant of a menu item: a size or an extra ingredient."""

    name: str = Field(..., description="Option label")
    price: float = Field(default=0, ge=0, description="Price added to the base price")


class MenuItem(Document):
    """A stored menu item."""

    name: str = Field(..., description="Item name")
    category: Optional[str] = Field(None, description="Category document ID")
    price: float = Field(default=0, description="Base price")
    description: Optional[str] = None
    image: Optional[str] = None
    sizes: list[MenuItemOption] = Field(default_factory=list)
    extra_ingredient_prices: list[MenuItemOption] = Field(default_factory=list)


class MenuItemCreate(BaseModel):
    """Fields for a new menu item."""

    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    price: float = Field(default=0, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None
    sizes: list[MenuItemOption] = Field(default_factory=list)
    extra_ingredient_prices: list[MenuItemOption] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class MenuItemUpdate(BaseModel):
    """Partial menu item update. Only fields that were set are written."""

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None
    sizes: Optional[list[MenuItemOption]] = None
    extra_ingredient_prices: Optional[list[MenuItemOption]] = None

    model_config = {"extra": "allow"}


class Category(Document):
    """A stored menu category."""

    name: str = Field(..., description="Category name")


class CategoryCreate(BaseModel):
    """Fields for a new category, also used for renames."""

    name: str = Field(..., min_length=1)

"""
Menu module.

Menu items and the categories they are filed under.

Public API:
- MenuItemRepository, CategoryRepository: Document access
- MenuItem, Category: Stored documents
- MenuItemCreate, MenuItemUpdate, CategoryCreate: Write payloads
"""

from .models import (
    Category,
    CategoryCreate,
    MenuItem,
    MenuItemCreate,
    MenuItemOption,
    MenuItemUpdate,
)
from .repository import CategoryRepository, MenuItemRepository

__all__ = [
    # Repositories
    "MenuItemRepository",
    "CategoryRepository",
    # Models
    "MenuItem",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemOption",
    "Category",
    "CategoryCreate",
]

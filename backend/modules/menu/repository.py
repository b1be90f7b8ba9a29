"""
Menu repositories.

Encapsulates document access for the `menu_items` and `categories`
collections. Menu items reference categories by id; nothing here checks
that the referenced category exists.
"""

from shared.repository import BaseRepository, DocumentInput, privileged
from .models import Category, MenuItem


class MenuItemRepository(BaseRepository[MenuItem]):
    """
    Repository for menu items.

    Creating, editing and deleting items is admin-gated by the caller.
    Restricted repositories issue every operation and leave the final
    say to the store's row level security.
    """

    model = MenuItem
    default_table = "menu_items"

    async def create(self, data: DocumentInput) -> MenuItem:
        """
        Create a menu item with a store-generated id.

        Returns:
            The stored item including id and timestamps.
        """
        return await self._insert(data)

    async def find_by_category(self, category_id: str) -> list[MenuItem]:
        """List the items filed under a category, in store order."""
        return await self._select(filters={"category": category_id})

    async def list_all(self) -> list[MenuItem]:
        """List every menu item, in store order."""
        return await self._select()

    async def delete(self, item_id: str) -> None:
        """Delete a menu item. Deleting a missing item is a no-op."""
        await self._delete(item_id)


class CategoryRepository(BaseRepository[Category]):
    """Repository for menu categories. Reads are open, writes are privileged."""

    model = Category
    default_table = "categories"

    @privileged
    async def create(self, data: DocumentInput) -> Category:
        return await self._insert(data)

    async def list_all(self) -> list[Category]:
        return await self._select()

    @privileged
    async def update(self, category_id: str, data: DocumentInput) -> None:
        await super().update(category_id, data)

    @privileged
    async def delete(self, category_id: str) -> None:
        await self._delete(category_id)

"""
Order repository.

Encapsulates document access for the `orders` collection. Orders are
never deleted; listings come back newest first.
"""

from shared.repository import BaseRepository, DocumentInput, privileged
from .models import Order


class OrderRepository(BaseRepository[Order]):
    """
    Repository for orders.

    Note: This repository does NOT check that the caller owns an order.
    Restricted repositories leave that to the store's row level security.
    """

    model = Order
    default_table = "orders"

    async def create(self, data: DocumentInput) -> Order:
        """
        Create an order with a store-generated id.

        `paid` is stored as False unless the caller set it truthy.
        """
        return await self._insert(data, defaults={"paid": False})

    async def find_by_user_email(self, email: str) -> list[Order]:
        """List a customer's orders, newest first."""
        return await self._select(
            filters={"user_email": email},
            order_by="created_at",
            descending=True,
        )

    @privileged
    async def list_all(self) -> list[Order]:
        """List every order, newest first."""
        return await self._select(order_by="created_at", descending=True)

"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the store
client, the token verifier, the repositories and the auth service.
The container is built once at startup and kept on `app.state`; route
handlers reach it through the dependency functions at the bottom.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TYPE_CHECKING

from fastapi import Request
from supabase import AsyncClient

from shared.config import Settings, get_settings
from shared.database import AccessMode, get_supabase_client, get_supabase_user_client

# Type checking imports (avoids import cycles at module load)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.verifier import TokenVerifier
    from modules.menu.repository import CategoryRepository, MenuItemRepository
    from modules.orders.repository import OrderRepository
    from modules.users.repository import UserRepository


@dataclass(frozen=True)
class RestrictedRepositories:
    """Repositories bound to one caller's store session."""

    users: "UserRepository"
    menu_items: "MenuItemRepository"
    categories: "CategoryRepository"
    orders: "OrderRepository"


class ServiceContainer:
    """
    Container for all service instances.

    Holds the privileged store client and creates services lazily on
    first access; they are cached for the container's lifetime.
    Restricted repositories are built per caller by restricted().
    """

    def __init__(
        self,
        db: AsyncClient,
        settings: Optional[Settings] = None,
        verifier: "Optional[TokenVerifier]" = None,
        user_client_factory: Callable[[str], Awaitable[AsyncClient]] = get_supabase_user_client,
    ) -> None:
        self._db = db
        self._settings = settings or get_settings()
        self._verifier = verifier
        self._user_client_factory = user_client_factory
        self._auth_service: "IAuthService | None" = None
        self._users: "UserRepository | None" = None
        self._menu_items: "MenuItemRepository | None" = None
        self._categories: "CategoryRepository | None" = None
        self._orders: "OrderRepository | None" = None

    @property
    def verifier(self) -> "TokenVerifier":
        """Get the token verifier."""
        if self._verifier is None:
            from modules.auth.verifier import TokenVerifier
            self._verifier = TokenVerifier.from_settings(self._settings)
        return self._verifier

    @property
    def users(self) -> "UserRepository":
        """Get the privileged user repository."""
        if self._users is None:
            from modules.users.repository import UserRepository
            self._users = UserRepository(self._db, table=self._settings.users_table)
        return self._users

    @property
    def menu_items(self) -> "MenuItemRepository":
        """Get the privileged menu item repository."""
        if self._menu_items is None:
            from modules.menu.repository import MenuItemRepository
            self._menu_items = MenuItemRepository(self._db, table=self._settings.menu_items_table)
        return self._menu_items

    @property
    def categories(self) -> "CategoryRepository":
        """Get the privileged category repository."""
        if self._categories is None:
            from modules.menu.repository import CategoryRepository
            self._categories = CategoryRepository(self._db, table=self._settings.categories_table)
        return self._categories

    @property
    def orders(self) -> "OrderRepository":
        """Get the privileged order repository."""
        if self._orders is None:
            from modules.orders.repository import OrderRepository
            self._orders = OrderRepository(self._db, table=self._settings.orders_table)
        return self._orders

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(verifier=self.verifier, users=self.users)
        return self._auth_service

    async def restricted(self, access_token: str) -> RestrictedRepositories:
        """
        Build repositories that act as the caller.

        Args:
            access_token: The caller's bearer token; the store's row level
                security evaluates every query against it.
        """
        from modules.menu.repository import CategoryRepository, MenuItemRepository
        from modules.orders.repository import OrderRepository
        from modules.users.repository import UserRepository

        db = await self._user_client_factory(access_token)
        mode = AccessMode.RESTRICTED
        return RestrictedRepositories(
            users=UserRepository(db, mode, table=self._settings.users_table),
            menu_items=MenuItemRepository(db, mode, table=self._settings.menu_items_table),
            categories=CategoryRepository(db, mode, table=self._settings.categories_table),
            orders=OrderRepository(db, mode, table=self._settings.orders_table),
        )

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._users = None
        self._menu_items = None
        self._categories = None
        self._orders = None


async def create_container(settings: Optional[Settings] = None) -> ServiceContainer:
    """Build the container around the cached service-role client."""
    db = await get_supabase_client()
    return ServiceContainer(db, settings=settings)


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's container."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container not initialised")
    return container


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_user_repository(request: Request) -> "UserRepository":
    """FastAPI dependency for the privileged user repository."""
    return get_container(request).users


def get_menu_item_repository(request: Request) -> "MenuItemRepository":
    """FastAPI dependency for the privileged menu item repository."""
    return get_container(request).menu_items


def get_category_repository(request: Request) -> "CategoryRepository":
    """FastAPI dependency for the privileged category repository."""
    return get_container(request).categories


def get_order_repository(request: Request) -> "OrderRepository":
    """FastAPI dependency for the privileged order repository."""
    return get_container(request).orders

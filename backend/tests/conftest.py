"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from shared.config import get_settings
from shared.database import reset_client_cache
from modules.auth.service import AuthService
from modules.auth.verifier import TokenVerifier
from modules.menu.repository import CategoryRepository, MenuItemRepository
from modules.orders.repository import OrderRepository
from modules.users.repository import UserRepository

from fakes import FakeSupabase, TickingClock
from helpers import TEST_JWT_SECRET, create_test_token


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset cached settings and clients before and after each test."""
    get_settings.cache_clear()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_client_cache()


@pytest.fixture
def fake_db() -> FakeSupabase:
    """An empty in-memory store."""
    return FakeSupabase()


@pytest.fixture
def clock() -> TickingClock:
    """A clock that advances one second per read."""
    return TickingClock()


@pytest.fixture
def user_repository(fake_db, clock) -> UserRepository:
    return UserRepository(fake_db, clock=clock)


@pytest.fixture
def menu_item_repository(fake_db, clock) -> MenuItemRepository:
    return MenuItemRepository(fake_db, clock=clock)


@pytest.fixture
def category_repository(fake_db, clock) -> CategoryRepository:
    return CategoryRepository(fake_db, clock=clock)


@pytest.fixture
def order_repository(fake_db, clock) -> OrderRepository:
    return OrderRepository(fake_db, clock=clock)


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier(secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_service(verifier, user_repository) -> AuthService:
    return AuthService(verifier=verifier, users=user_repository)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}

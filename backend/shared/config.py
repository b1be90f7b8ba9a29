"""
Centralized configuration for the food ordering backend.

All settings are loaded from environment variables with sensible defaults.
Store and identity-provider settings are namespaced with SUPABASE_*.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Food Ordering API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase (document store + identity provider)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""

    # Access token verification
    jwt_audience: str = "authenticated"
    jwt_algorithms: list[str] = ["HS256"]

    # Collections
    users_table: str = "users"
    menu_items_table: str = "menu_items"
    orders_table: str = "orders"
    categories_table: str = "categories"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

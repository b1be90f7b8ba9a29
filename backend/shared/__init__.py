"""
Shared infrastructure for the food ordering backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory and access modes
- exceptions: Base exception classes
- models: Base document model
- repository: Base repository with timestamp bookkeeping

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    AccessMode,
    get_supabase_client,
    get_supabase_user_client,
    reset_client_cache,
)
from .exceptions import (
    FoodOrderError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    StoreError,
    DocumentNotFoundError,
    PrivilegedOperationError,
)
from .models import Document

__all__ = [
    "Settings",
    "get_settings",
    "AccessMode",
    "get_supabase_client",
    "get_supabase_user_client",
    "reset_client_cache",
    "FoodOrderError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "StoreError",
    "DocumentNotFoundError",
    "PrivilegedOperationError",
    "Document",
]

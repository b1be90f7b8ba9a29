"""
Database client factory for Supabase.

Provides both service-role clients (privileged access, bypassing RLS)
and user-authenticated clients (restricted access, respecting RLS).
"""

from enum import Enum
from typing import Optional
from supabase import acreate_client, AsyncClient

from .config import get_settings


class AccessMode(str, Enum):
    """
    Which store context a repository talks to.

    PRIVILEGED repositories hold a service-role client and may run
    administrative operations. RESTRICTED repositories hold a client
    authenticated as the caller; the store's row level security decides
    what they can see and change.
    """

    PRIVILEGED = "privileged"
    RESTRICTED = "restricted"


# Module-level client cache
_service_client: Optional[AsyncClient] = None


async def get_supabase_client() -> AsyncClient:
    """
    Get Supabase client with service role (bypasses RLS).

    Use this for trusted server-side operations that need full database
    access, such as resolving profiles during authorization.

    Returns:
        Async Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = await acreate_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


async def get_supabase_user_client(access_token: str) -> AsyncClient:
    """
    Get Supabase client authenticated as a specific user.

    Use this for operations that should respect Row Level Security (RLS),
    such as a customer reading their own orders.

    Args:
        access_token: JWT access token from Supabase Auth

    Returns:
        Async Supabase client whose table queries carry the user's token
    """
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
        )

    client = await acreate_client(
        settings.supabase_url,
        settings.supabase_anon_key,
    )
    # Table queries go through PostgREST, which applies RLS for this token
    client.postgrest.auth(access_token)
    return client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None

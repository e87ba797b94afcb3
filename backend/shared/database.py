"""
Supabase client access.

The backend holds one service-role client per process. Row-level security is
bypassed; every authorization decision is made in the services through
shared.guard.
"""

from functools import lru_cache

from supabase import create_client, Client

from .config import get_settings


@lru_cache
def get_supabase_client() -> Client:
    """
    Get the process-wide Supabase client.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    settings = get_settings()
    if not (settings.supabase_url and settings.supabase_service_role_key):
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """Drop the cached client so the next call reads settings again."""
    get_supabase_client.cache_clear()

"""
Supabase access for the repositories.

One service-role client is shared by every repository; authorization is
enforced by the API layer, not by row level security. Writes fail with
PostgREST's APIError, whose ``code`` is the Postgres SQLSTATE. Repositories
use ``is_unique_violation`` to turn a collision the client caused into a
ConflictError instead of a 500.
"""

from functools import lru_cache
from typing import Optional

from postgrest.exceptions import APIError
from supabase import create_client, Client

from .config import Settings, get_settings

# https://www.postgresql.org/docs/current/errcodes-appendix.html
UNIQUE_VIOLATION = "23505"

_REQUIRED_SETTINGS = {
    "supabase_url": "YOGA_SUPABASE_URL",
    "supabase_service_role_key": "YOGA_SUPABASE_SERVICE_ROLE_KEY",
}


def _missing_settings(settings: Settings) -> list[str]:
    return [env for field, env in _REQUIRED_SETTINGS.items() if not getattr(settings, field)]


@lru_cache
def get_supabase_client() -> Client:
    """
    Service-role client, created on first use and then reused.

    Raises:
        RuntimeError: Naming the environment variables that are not set
    """
    settings = get_settings()
    missing = _missing_settings(settings)
    if missing:
        raise RuntimeError(f"Supabase configuration missing. Set {', '.join(missing)}.")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """Forget the shared client; the next call reads settings again."""
    get_supabase_client.cache_clear()


def sqlstate(error: BaseException) -> Optional[str]:
    """Postgres error code of a PostgREST error, or None for anything else."""
    return error.code if isinstance(error, APIError) else None


def is_unique_violation(error: BaseException) -> bool:
    """True when a write collided with a UNIQUE constraint or index."""
    return sqlstate(error) == UNIQUE_VIOLATION

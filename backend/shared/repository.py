"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.

The Supabase client is synchronous. Services call repository methods through
run_blocking() so that every storage round-trip runs in a worker thread and
is bounded by a timeout.
"""

import asyncio
from typing import Any, Callable, Optional, TypeVar, Generic

from supabase import Client


T = TypeVar("T")
R = TypeVar("R")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            def find_by_email(self, email: str) -> Optional[User]:
                result = self._db.table("users").select("*").eq("email", email).execute()
                row = self._first(result.data)
                return User(**row) if row else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _first(rows: Optional[list[dict[str, Any]]]) -> Optional[dict[str, Any]]:
        """Return the first row of a result set, or None when it is empty."""
        if not rows:
            return None
        return rows[0]


async def run_blocking(
    func: Callable[..., R],
    *args: Any,
    timeout: Optional[float] = None,
) -> R:
    """
    Run a blocking storage call in a worker thread.

    Args:
        func: The synchronous callable (usually a repository method)
        *args: Positional arguments for func
        timeout: Seconds to wait before giving up, None for no limit

    Returns:
        Whatever func returns

    Raises:
        asyncio.TimeoutError: If the call does not finish within timeout.
            The worker thread itself cannot be interrupted and may still
            complete later.
    """
    return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=timeout)

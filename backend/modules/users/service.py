"""
User service.

Wraps the user store for the API layer. Store calls run in worker
threads bounded by the storage timeout.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from shared.exceptions import StorageTimeoutError
from shared.models import UserRole
from shared.repository import run_blocking

from .interfaces import IUserStore
from .models import RegisterRequest, User
from .exceptions import DuplicateUserError, UserNotFoundError

logger = logging.getLogger(__name__)

R = TypeVar("R")


class UserService:
    """Profile lookup, self-registration and role changes."""

    def __init__(self, store: IUserStore, timeout: Optional[float] = None):
        self._store = store
        self._timeout = timeout

    async def get_user(self, email: str) -> User:
        """Get a user by email or raise UserNotFoundError."""
        user = await self._call(self._store.find_by_email, email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def register(self, email: str, request: RegisterRequest) -> User:
        """
        Create the caller's user record.

        New users are always members; only an admin can change that.
        """
        if await self._call(self._store.find_by_email, email) is not None:
            raise DuplicateUserError(email)
        user = User(
            email=email,
            name=request.name,
            photo_url=request.photo_url,
            role=UserRole.MEMBER,
        )
        created = await self._call(self._store.create, user)
        logger.info(f"Registered user {email}")
        return created

    async def set_role(self, email: str, role: UserRole) -> User:
        """Change a user's role."""
        user = await self._call(self._store.set_role, email, role)
        if user is None:
            raise UserNotFoundError(email)
        logger.info(f"Role of {email} set to {role.value}")
        return user

    async def _call(self, func: Callable[..., R], *args: Any) -> R:
        try:
            return await run_blocking(func, *args, timeout=self._timeout)
        except asyncio.TimeoutError:
            raise StorageTimeoutError("user_store", self._timeout)

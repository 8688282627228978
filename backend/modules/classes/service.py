"""
Class catalog service.

Wraps ClassRepository for the API layer: every repository call runs in a
worker thread bounded by the storage timeout.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from shared.exceptions import StorageTimeoutError
from shared.repository import run_blocking

from .models import (
    AddToCartRequest,
    CartEntry,
    ClassRecord,
    ClassStatusUpdate,
    CreateClassRequest,
)
from .repository import ClassRepository
from .exceptions import (
    CartEntryNotFoundError,
    ClassNotFoundError,
    DuplicateCartEntryError,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


class ClassService:
    """Class creation, review and cart management."""

    def __init__(self, repository: ClassRepository, timeout: Optional[float] = None):
        self._repository = repository
        self._timeout = timeout

    async def create_class(self, request: CreateClassRequest, instructor_email: str) -> ClassRecord:
        """Create a class owned by instructor_email, pending review."""
        record = await self._call(self._repository.create_class, request, instructor_email)
        logger.info(f"Class {record.id} created by {instructor_email}")
        return record

    async def review_class(self, class_id: str, update: ClassStatusUpdate) -> ClassRecord:
        """Apply an admin review decision."""
        record = await self._call(
            self._repository.update_status, class_id, update.status, update.reason
        )
        if record is None:
            raise ClassNotFoundError(class_id)
        return record

    async def add_to_cart(self, request: AddToCartRequest, email: str) -> CartEntry:
        """Add a class to a user's cart."""
        class_id = str(request.class_id)
        if await self._call(self._repository.get_class, class_id) is None:
            raise ClassNotFoundError(class_id)
        if await self._call(self._repository.find_cart_entry, class_id, email):
            raise DuplicateCartEntryError(class_id, email)
        entry = CartEntry(user_email=email, class_id=class_id)
        return await self._call(self._repository.add_cart_entry, entry)

    async def remove_from_cart(self, class_id: str, email: str) -> None:
        """Remove a class from a user's cart."""
        if not await self._call(self._repository.remove_cart_entry, class_id, email):
            raise CartEntryNotFoundError(class_id, email)

    async def _call(self, func: Callable[..., R], *args: Any) -> R:
        try:
            return await run_blocking(func, *args, timeout=self._timeout)
        except asyncio.TimeoutError:
            raise StorageTimeoutError("class_store", self._timeout)

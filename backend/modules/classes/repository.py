"""
Class catalog repository.

Encapsulates Supabase queries for the classes and cart tables.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.database import is_unique_violation
from shared.repository import BaseRepository

from .models import CartEntry, ClassRecord, ClassStatus, CreateClassRequest
from .exceptions import DuplicateCartEntryError

CLASSES_TABLE = "classes"
CART_TABLE = "cart"


class ClassRepository(BaseRepository[ClassRecord]):
    """
    Repository for classes and cart entries.

    Note: This repository does NOT perform authorization checks.
    """

    def create_class(self, request: CreateClassRequest, instructor_email: str) -> ClassRecord:
        """Insert a class in pending status."""
        data = request.model_dump()
        data["instructor_email"] = instructor_email
        data["status"] = ClassStatus.PENDING.value
        result = self._db.table(CLASSES_TABLE).insert(data).execute()
        return self._map_to_class(result.data[0])

    def get_class(self, class_id: str) -> Optional[ClassRecord]:
        """Get a class by ID, or None."""
        result = self._db.table(CLASSES_TABLE).select("*").eq("id", class_id).execute()
        row = self._first(result.data)
        return self._map_to_class(row) if row else None

    def update_status(
        self,
        class_id: str,
        status: ClassStatus,
        reason: Optional[str] = None,
    ) -> Optional[ClassRecord]:
        """Set review status and reason. Returns None when no class matched."""
        result = (
            self._db.table(CLASSES_TABLE)
            .update({"status": status.value, "reason": reason})
            .eq("id", class_id)
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_class(row) if row else None

    # -------------------------------------------------------------------------
    # Cart operations
    # -------------------------------------------------------------------------

    def find_cart_entry(self, class_id: str, email: str) -> Optional[CartEntry]:
        """Get the cart entry for (class_id, email), or None."""
        result = (
            self._db.table(CART_TABLE)
            .select("*")
            .eq("class_id", class_id)
            .eq("user_email", email)
            .execute()
        )
        row = self._first(result.data)
        return CartEntry(**row) if row else None

    def add_cart_entry(self, entry: CartEntry) -> CartEntry:
        """
        Insert a cart entry.

        Raises:
            DuplicateCartEntryError: The user already has this class in the cart
        """
        try:
            result = self._db.table(CART_TABLE).insert(entry.model_dump(mode="json")).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateCartEntryError(entry.class_id, entry.user_email) from e
            raise
        return CartEntry(**result.data[0])

    def remove_cart_entry(self, class_id: str, email: str) -> bool:
        """Delete the cart entry for (class_id, email). Returns True if one was deleted."""
        result = (
            self._db.table(CART_TABLE)
            .delete()
            .eq("class_id", class_id)
            .eq("user_email", email)
            .execute()
        )
        return bool(result.data)

    def _map_to_class(self, row: dict[str, Any]) -> ClassRecord:
        return ClassRecord(**{**row, "id": str(row["id"])})

"""
User repository for database access.

Encapsulates Supabase queries against the users table.
"""

from typing import Optional

from postgrest.exceptions import APIError

from shared.database import is_unique_violation
from shared.models import UserRole
from shared.repository import BaseRepository

from .models import User
from .exceptions import DuplicateUserError

USERS_TABLE = "users"


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The API layer is responsible for gating role changes.
    """

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email.

        Args:
            email: The user's email address.

        Returns:
            The User, or None if not found.
        """
        result = self._db.table(USERS_TABLE).select("*").eq("email", email).execute()
        row = self._first(result.data)
        return User(**row) if row else None

    def create(self, user: User) -> User:
        """
        Insert a new user row.

        Raises:
            DuplicateUserError: A user with this email already exists
        """
        try:
            result = self._db.table(USERS_TABLE).insert(user.model_dump(mode="json")).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateUserError(user.email) from e
            raise
        return User(**result.data[0])

    def set_role(self, email: str, role: UserRole) -> Optional[User]:
        """
        Change a user's role.

        Returns:
            The updated User, or None if no row matched.
        """
        result = (
            self._db.table(USERS_TABLE)
            .update({"role": role.value})
            .eq("email", email)
            .execute()
        )
        row = self._first(result.data)
        return User(**row) if row else None

"""
User store interface.

The access policy only needs find_by_email; the users routes use the rest.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserRole

from .models import User


@runtime_checkable
class IUserStore(Protocol):
    """Contract of the user store collaborator. Methods are blocking."""

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email, or None."""
        ...

    def create(self, user: User) -> User:
        """Insert a new user and return the stored row."""
        ...

    def set_role(self, email: str, role: UserRole) -> Optional[User]:
        """Change a user's role. Returns None when no user matched."""
        ...

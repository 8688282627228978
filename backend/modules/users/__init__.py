"""
Users module.

Stores users and their roles.

Public API:
- IUserStore: Interface for the user store
- User, RegisterRequest, RoleUpdateRequest, UserProfileResponse: Models
- UserNotFoundError, DuplicateUserError: Exceptions
"""

from .interfaces import IUserStore
from .models import User, RegisterRequest, RoleUpdateRequest, UserProfileResponse
from .exceptions import UserNotFoundError, DuplicateUserError

__all__ = [
    "IUserStore",
    "User",
    "RegisterRequest",
    "RoleUpdateRequest",
    "UserProfileResponse",
    "UserNotFoundError",
    "DuplicateUserError",
]

"""
Authentication module.

Verifies bearer tokens and issues new ones.

Public API:
- IAuthService: Interface for auth operations
- TokenPayload: Raw decoded token payload
- Auth exceptions: InvalidTokenError, ExpiredTokenError, MissingTokenError
"""

from .interfaces import IAuthService
from .models import TokenPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
]

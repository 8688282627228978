"""
User module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when no user exists for an email address."""

    def __init__(self, email: str):
        super().__init__(
            f"User not found: {email}",
            code="USER_NOT_FOUND",
            details={"email": email},
        )


class DuplicateUserError(ConflictError):
    """Raised when registering an email that already has a user."""

    def __init__(self, email: str):
        super().__init__(
            f"User already registered: {email}",
            code="DUPLICATE_USER",
            details={"email": email},
        )

"""
Access policy exceptions.

Both are AuthorizationError and map to HTTP 403, distinct from the
401 used for token failures.
"""

from shared.exceptions import AuthorizationError


class UnknownUserError(AuthorizationError):
    """Raised when the token's subject has no user record."""

    def __init__(self, email: str):
        super().__init__(
            f"No user registered for {email}",
            code="UNKNOWN_USER",
            details={"email": email},
        )


class RoleMismatchError(AuthorizationError):
    """Raised when the user's role is not the role the route requires."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="ROLE_MISMATCH",
            details={"required_role": required_role, "user_role": user_role},
        )

"""
Authentication module exceptions.

These exceptions are raised by the auth module and are mapped to
HTTP 401 responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a token fails signature, structure or expiry checks."""

    def __init__(
        self,
        message: str = "Invalid authentication token",
        code: str = "INVALID_TOKEN",
    ):
        super().__init__(message, code=code)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")

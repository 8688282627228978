"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from datetime import timedelta
from typing import Protocol, Optional, runtime_checkable

from shared.models import Claims


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity verification.

    Verification is pure: it only checks the token against the configured
    secret and never touches storage.
    """

    def verify(self, token: Optional[str]) -> Claims:
        """
        Verify a bearer token and return its claims.

        Args:
            token: Raw token string from the Authorization header

        Returns:
            Claims with subject email, issued-at and expiry

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the signature, structure or expiry check fails
        """
        ...

    def issue_token(self, email: str, expires_in: Optional[timedelta] = None) -> str:
        """
        Sign a new access token for an email address.

        Args:
            email: Subject email
            expires_in: Token lifetime, defaults to the configured lifetime

        Returns:
            Encoded token string
        """
        ...

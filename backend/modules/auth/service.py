"""
Authentication service implementation.

Verifies HS256-signed access tokens and issues new ones. The signing
secret is passed in at construction; nothing here reads process state.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.models import Claims

from .interfaces import IAuthService
from .models import TokenPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LIFETIME = timedelta(days=30)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are stateless: there is no session store, so a token stays
    valid until it expires.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        token_lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._token_lifetime = token_lifetime

    def verify(self, token: Optional[str]) -> Claims:
        """
        Verify a bearer token and return its claims.

        An unconfigured secret rejects every token instead of accepting
        unsigned ones.
        """
        if not token:
            raise MissingTokenError()

        if not self._secret:
            logger.error("Token verification attempted without a configured secret")
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
            token_payload = TokenPayload(**payload)
            return Claims(
                email=token_payload.email,
                iat=token_payload.iat,
                exp=token_payload.exp,
            )

        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: missing or malformed claims")

    def issue_token(self, email: str, expires_in: Optional[timedelta] = None) -> str:
        """Sign a new access token for an email address."""
        if not self._secret:
            raise InvalidTokenError("Server authentication not configured")

        now = datetime.now(timezone.utc)
        payload = {
            "sub": email,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + (expires_in or self._token_lifetime)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton, configured from settings."""
    global _service_instance
    if _service_instance is None:
        settings = get_settings()
        _service_instance = AuthService(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            token_lifetime=timedelta(days=settings.token_expiry_days),
        )
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None

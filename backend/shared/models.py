"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, EmailStr, Field


class UserRole(str, Enum):
    """Roles a user can hold. Exactly one at a time."""

    MEMBER = "member"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class Claims(BaseModel):
    """
    Verified identity assertions decoded from an access token.

    Populated by the auth module and made available to route handlers
    via dependency injection. Roles are NOT carried in the token; they are
    resolved from the user store on every request.
    """

    email: EmailStr = Field(..., description="Subject email address")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra fields from the token
    }

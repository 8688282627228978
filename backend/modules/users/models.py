"""
User module data models.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import UserRole


class User(BaseModel):
    """
    A marketplace user, identified by email.

    Rows written before roles existed have no role; they read as members.
    """

    email: EmailStr = Field(..., description="Unique email address")
    name: Optional[str] = Field(None, description="Display name")
    photo_url: Optional[str] = Field(None, description="Avatar URL")
    role: UserRole = Field(default=UserRole.MEMBER, description="Current role")

    model_config = {"extra": "ignore"}

    @field_validator("role", mode="before")
    @classmethod
    def default_missing_role(cls, value):
        return UserRole.MEMBER if value is None else value


class RoleUpdateRequest(BaseModel):
    """Request to change a user's role (admin only)."""

    role: UserRole = Field(..., description="New role")


class RegisterRequest(BaseModel):
    """Profile fields a user may set when registering."""

    name: Optional[str] = Field(None, max_length=200)
    photo_url: Optional[str] = None


class UserProfileResponse(BaseModel):
    """User profile response model."""

    email: EmailStr
    name: Optional[str] = None
    photo_url: Optional[str] = None
    role: UserRole

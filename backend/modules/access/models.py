"""
Access policy data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import UserRole
from modules.users.models import User


class DenyReason(str, Enum):
    """Why a request was denied."""

    UNKNOWN_USER = "UNKNOWN_USER"
    ROLE_MISMATCH = "ROLE_MISMATCH"


class AccessDecision(BaseModel):
    """
    Outcome of a policy evaluation.

    allowed is True only when reason is None.
    """

    allowed: bool
    required_role: UserRole
    reason: Optional[DenyReason] = None
    user: Optional[User] = Field(None, description="The resolved user, if any")

    model_config = {"frozen": True}

    @classmethod
    def allow(cls, required_role: UserRole, user: User) -> "AccessDecision":
        return cls(allowed=True, required_role=required_role, user=user)

    @classmethod
    def deny(
        cls,
        required_role: UserRole,
        reason: DenyReason,
        user: Optional[User] = None,
    ) -> "AccessDecision":
        return cls(allowed=False, required_role=required_role, reason=reason, user=user)

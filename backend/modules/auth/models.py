"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, Field


class TokenPayload(BaseModel):
    """
    Decoded access token payload.

    Tokens may carry extra profile fields (name, photo) from the client
    that requested them; only the identity and timing claims are kept.
    """

    email: str = Field(..., description="Subject email address")
    sub: Optional[str] = Field(None, description="Subject, mirrors email when present")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    model_config = {"extra": "ignore"}

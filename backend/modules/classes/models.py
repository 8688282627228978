"""
Class catalog and cart data models.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class ClassStatus(str, Enum):
    """Review status of a class."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ClassRecord(BaseModel):
    """
    A class offered by an instructor.

    instructor_email is a back-reference to the user who created the class,
    not an ownership check.
    """

    id: str = Field(..., description="Class ID (UUID)")
    name: str
    instructor_email: EmailStr
    available_seats: int = Field(..., ge=0)
    price: int = Field(..., ge=0, description="Price in minor currency units")
    status: ClassStatus = ClassStatus.PENDING
    reason: Optional[str] = Field(None, description="Review feedback from an admin")
    description: Optional[str] = None
    video_link: Optional[str] = None

    model_config = {"extra": "ignore"}


class CreateClassRequest(BaseModel):
    """Request to create a class. New classes always start pending."""

    name: str = Field(..., min_length=1, max_length=200)
    available_seats: int = Field(..., ge=0)
    price: int = Field(..., ge=0, description="Price in minor currency units")
    description: Optional[str] = Field(None, max_length=5000)
    video_link: Optional[str] = None


class ClassStatusUpdate(BaseModel):
    """Admin review decision for a class."""

    status: ClassStatus
    reason: Optional[str] = Field(None, max_length=1000)


class CartEntry(BaseModel):
    """A class a user intends to pay for."""

    user_email: EmailStr
    class_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"extra": "ignore"}


class AddToCartRequest(BaseModel):
    """Request to add a class to the caller's cart."""

    class_id: UUID = Field(..., description="Class ID")

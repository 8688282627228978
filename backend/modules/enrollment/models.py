"""
Enrollment module data models.

PaymentRecord and EnrollmentRecord are what gets persisted; StepOutcome and
EnrollmentResult describe what happened during one enrollment so that a
partially applied enrollment can be detected and reconciled.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EnrollmentStep(str, Enum):
    """The four steps of an enrollment, in execution order."""

    PAYMENT = "payment"
    ENROLLMENT = "enrollment"
    SEAT_UPDATE = "seat_update"
    CART_REMOVAL = "cart_removal"


class StepStatus(str, Enum):
    """Outcome of a single step."""

    SUCCEEDED = "succeeded"
    NO_MATCH = "no_match"  # the store matched no document (missing class, empty cart, no seats)
    FAILED = "failed"      # the store raised


class PaymentRecord(BaseModel):
    """
    A completed payment. Immutable once created.

    Amounts are in minor currency units (cents).
    """

    id: Optional[str] = Field(None, description="Assigned by the store")
    class_id: str = Field(..., min_length=1, description="Paid-for class")
    email: EmailStr = Field(..., description="Payer email")
    amount: int = Field(..., gt=0, description="Amount in minor currency units")
    currency: str = Field(default="usd", min_length=3, max_length=3)
    transaction_id: Optional[str] = Field(None, description="Payment gateway reference")
    created_at: datetime = Field(default_factory=_utcnow)

    model_config = {"frozen": True, "extra": "ignore"}


class EnrollmentRecord(BaseModel):
    """Grants a user access to a class. One per successful payment."""

    id: Optional[str] = Field(None, description="Assigned by the store")
    class_id: str
    email: EmailStr
    payment_id: Optional[str] = None
    enrolled_at: datetime = Field(default_factory=_utcnow)

    model_config = {"extra": "ignore"}


class StoreResult(BaseModel):
    """What a store call reported back."""

    matched: bool = Field(..., description="Whether any document was written or matched")
    data: Optional[dict[str, Any]] = Field(None, description="Returned row, if any")


class StepOutcome(BaseModel):
    """The result of one enrollment step."""

    step: EnrollmentStep
    status: StepStatus
    detail: Optional[str] = None
    data: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == StepStatus.SUCCEEDED


class EnrollmentResult(BaseModel):
    """
    Aggregated outcome of complete_enrollment.

    The payment step is always succeeded here: a payment failure raises
    instead of producing a result.
    """

    payment: StepOutcome
    enrollment: StepOutcome
    seat_update: StepOutcome
    cart_removal: StepOutcome

    @property
    def outcomes(self) -> list[StepOutcome]:
        return [self.payment, self.enrollment, self.seat_update, self.cart_removal]

    @property
    def succeeded(self) -> bool:
        """True when all four steps succeeded."""
        return all(outcome.ok for outcome in self.outcomes)

    @property
    def partial(self) -> bool:
        """True when the payment was recorded but a later step did not succeed."""
        return self.payment.ok and not self.succeeded

    @property
    def incomplete_steps(self) -> list[EnrollmentStep]:
        return [outcome.step for outcome in self.outcomes if not outcome.ok]


class PaymentCompletionRequest(BaseModel):
    """Body of the payment completion endpoint. The payer is the caller."""

    class_id: UUID = Field(..., description="Paid-for class")
    amount: int = Field(..., gt=0, description="Amount in minor currency units")
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    transaction_id: Optional[str] = None


class EnrollmentResponse(BaseModel):
    """API response for a completed payment."""

    status: str = Field(..., description="'completed' or 'partial'")
    incomplete_steps: list[EnrollmentStep] = Field(default_factory=list)
    result: EnrollmentResult

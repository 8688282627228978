"""
Enrollment module interfaces.

IEnrollmentStore is the storage collaborator the coordinator writes to.
Its methods are blocking; the coordinator runs them in worker threads.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import EnrollmentRecord, EnrollmentResult, PaymentRecord, StoreResult


@runtime_checkable
class IEnrollmentStore(Protocol):
    """Storage capabilities needed to enroll a user."""

    def insert_payment(self, payment: PaymentRecord) -> StoreResult:
        """
        Append a payment record.

        Must raise DuplicatePaymentError when payment.transaction_id is
        already recorded.
        """
        ...

    def insert_enrollment(self, enrollment: EnrollmentRecord) -> StoreResult:
        """Append an enrollment record."""
        ...

    def increment_class_field(
        self,
        class_id: str,
        field: str = "available_seats",
        delta: int = -1,
    ) -> StoreResult:
        """
        Atomically add delta to a numeric class field.

        Must be a single server-side update, never read-then-write.
        Reports matched=False when the class is missing or the update
        would take the counter below zero.
        """
        ...

    def delete_cart_entry(self, class_id: str, email: str) -> StoreResult:
        """Delete the cart entry for (class_id, email)."""
        ...

    def list_enrollments(self, email: Optional[str] = None) -> list[EnrollmentRecord]:
        """List enrollment records, optionally for one user."""
        ...


@runtime_checkable
class IEnrollmentService(Protocol):
    """Interface the API layer uses for enrollments."""

    async def complete_enrollment(self, payment: PaymentRecord) -> EnrollmentResult:
        """
        Record a completed payment and enroll the payer.

        Raises:
            PaymentPersistError: The payment could not be stored
            DuplicatePaymentError: The transaction was already processed
            EnrollmentTimeoutError: A step exceeded the storage timeout
        """
        ...

    async def list_enrollments(self, email: Optional[str] = None) -> list[EnrollmentRecord]:
        """List enrollment records, optionally for one user."""
        ...

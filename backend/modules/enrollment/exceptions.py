"""
Enrollment module exceptions.

Only fatal conditions are exceptions. Failures of the follow-up steps are
reported inside EnrollmentResult instead.
"""

from typing import Any, Optional

from shared.exceptions import ConflictError, YogaMasterError


class CoordinationError(YogaMasterError):
    """Base exception for enrollment coordination errors."""

    pass


class PaymentPersistError(CoordinationError):
    """
    Raised when the payment record could not be stored.

    Nothing else was attempted, so no state changed.
    """

    status_code = 502

    def __init__(self, class_id: str, email: str, reason: str):
        super().__init__(
            f"Failed to record payment for class {class_id}: {reason}",
            code="PAYMENT_PERSIST_FAILED",
            details={"class_id": class_id, "email": email, "reason": reason},
        )


class DuplicatePaymentError(CoordinationError, ConflictError):
    """
    Raised when a payment with the same transaction ID is already recorded.

    The earlier request already enrolled the payer, so nothing else runs.
    """

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Transaction already processed: {transaction_id}",
            code="DUPLICATE_TRANSACTION",
            details={"transaction_id": transaction_id},
        )
        self.transaction_id = transaction_id


class EnrollmentTimeoutError(CoordinationError):
    """Raised when a step did not finish within the storage timeout."""

    status_code = 504

    def __init__(
        self,
        step: str,
        timeout: Optional[float],
        completed: Optional[list[dict[str, Any]]] = None,
    ):
        super().__init__(
            f"Enrollment step '{step}' timed out after {timeout}s",
            code="ENROLLMENT_TIMEOUT",
            details={"step": step, "timeout": timeout, "completed": completed or []},
        )
        self.step = step

"""
Enrollment module.

Coordinates the writes that turn a completed payment into an enrollment.

Public API:
- IEnrollmentService / IEnrollmentStore: Interfaces
- PaymentRecord, EnrollmentRecord: Persisted records
- EnrollmentResult, StepOutcome, StepStatus, EnrollmentStep: Per-step reporting
- CoordinationError, PaymentPersistError, DuplicatePaymentError, EnrollmentTimeoutError: Fatal errors
"""

from .interfaces import IEnrollmentService, IEnrollmentStore
from .models import (
    PaymentRecord,
    EnrollmentRecord,
    StoreResult,
    StepOutcome,
    StepStatus,
    EnrollmentStep,
    EnrollmentResult,
    PaymentCompletionRequest,
    EnrollmentResponse,
)
from .exceptions import (
    CoordinationError,
    PaymentPersistError,
    DuplicatePaymentError,
    EnrollmentTimeoutError,
)

__all__ = [
    # Interfaces
    "IEnrollmentService",
    "IEnrollmentStore",
    # Models
    "PaymentRecord",
    "EnrollmentRecord",
    "StoreResult",
    "StepOutcome",
    "StepStatus",
    "EnrollmentStep",
    "EnrollmentResult",
    "PaymentCompletionRequest",
    "EnrollmentResponse",
    # Exceptions
    "CoordinationError",
    "PaymentPersistError",
    "DuplicatePaymentError",
    "EnrollmentTimeoutError",
]

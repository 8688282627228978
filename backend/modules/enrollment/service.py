"""
Enrollment coordinator.

Turns a completed payment into an enrollment with four sequential writes:

    1. record the payment
    2. record the enrollment
    3. decrement the class's available seats
    4. remove the matching cart entry

The collections involved have no shared transaction, so the writes are
best-effort and strictly ordered. Only a failure in step 1 aborts; later
failures are captured per step and returned, so that a payment is always
on record before any seat is taken. A transaction ID that is already on
record aborts before step 2, so a retried completion enrolls nobody
twice. Each step is bounded by a timeout, and a timeout aborts the whole
operation.

The coordinator holds no lock. Concurrent enrollments for the same class
rely on the store's atomic increment.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from shared.repository import run_blocking

from .interfaces import IEnrollmentService, IEnrollmentStore
from .models import (
    EnrollmentRecord,
    EnrollmentResult,
    EnrollmentStep,
    PaymentRecord,
    StepOutcome,
    StepStatus,
    StoreResult,
)
from .exceptions import DuplicatePaymentError, EnrollmentTimeoutError, PaymentPersistError

logger = logging.getLogger(__name__)

SEATS_FIELD = "available_seats"


class EnrollmentCoordinator(IEnrollmentService):
    """
    Implementation of the enrollment service.

    Args:
        store: Storage collaborator for payments, enrollments, classes and cart
        timeout: Seconds allowed for each store call, None for no limit
    """

    def __init__(self, store: IEnrollmentStore, timeout: Optional[float] = None):
        self._store = store
        self._timeout = timeout

    async def complete_enrollment(self, payment: PaymentRecord) -> EnrollmentResult:
        """Record a completed payment and enroll the payer."""
        completed: list[StepOutcome] = []

        try:
            stored = await self._call(
                EnrollmentStep.PAYMENT, completed, self._store.insert_payment, payment
            )
        except EnrollmentTimeoutError:
            raise
        except DuplicatePaymentError:
            logger.info(
                f"Rejected replayed transaction {payment.transaction_id} for {payment.email}"
            )
            raise
        except Exception as e:
            logger.error(
                f"Payment persist failed for {payment.email} on class {payment.class_id}: {e}"
            )
            raise PaymentPersistError(payment.class_id, payment.email, str(e)) from e

        payment_outcome = StepOutcome(
            step=EnrollmentStep.PAYMENT,
            status=StepStatus.SUCCEEDED,
            data=stored.data,
        )
        completed.append(payment_outcome)

        enrollment = EnrollmentRecord(
            class_id=payment.class_id,
            email=payment.email,
            payment_id=_row_id(stored.data) or payment.id,
        )
        enrollment_outcome = await self._run_step(
            EnrollmentStep.ENROLLMENT, completed, self._store.insert_enrollment, enrollment
        )
        seat_outcome = await self._run_step(
            EnrollmentStep.SEAT_UPDATE,
            completed,
            self._store.increment_class_field,
            payment.class_id,
            SEATS_FIELD,
            -1,
        )
        cart_outcome = await self._run_step(
            EnrollmentStep.CART_REMOVAL,
            completed,
            self._store.delete_cart_entry,
            payment.class_id,
            payment.email,
        )

        result = EnrollmentResult(
            payment=payment_outcome,
            enrollment=enrollment_outcome,
            seat_update=seat_outcome,
            cart_removal=cart_outcome,
        )

        if result.partial:
            logger.warning(
                f"Partial enrollment for {payment.email} on class {payment.class_id}: "
                f"incomplete steps {[step.value for step in result.incomplete_steps]}"
            )
        else:
            logger.info(f"Enrolled {payment.email} in class {payment.class_id}")

        return result

    async def list_enrollments(self, email: Optional[str] = None) -> list[EnrollmentRecord]:
        """List enrollment records, optionally for one user."""
        try:
            return await run_blocking(self._store.list_enrollments, email, timeout=self._timeout)
        except asyncio.TimeoutError:
            raise EnrollmentTimeoutError("list_enrollments", self._timeout)

    async def _run_step(
        self,
        step: EnrollmentStep,
        completed: list[StepOutcome],
        func: Callable[..., StoreResult],
        *args: Any,
    ) -> StepOutcome:
        """Run a non-fatal step and capture its outcome."""
        try:
            stored = await self._call(step, completed, func, *args)
        except EnrollmentTimeoutError:
            raise
        except Exception as e:
            logger.warning(f"Enrollment step {step.value} failed: {e}")
            outcome = StepOutcome(step=step, status=StepStatus.FAILED, detail=str(e))
        else:
            if stored.matched:
                outcome = StepOutcome(step=step, status=StepStatus.SUCCEEDED, data=stored.data)
            else:
                outcome = StepOutcome(
                    step=step,
                    status=StepStatus.NO_MATCH,
                    detail="No matching document",
                    data=stored.data,
                )

        completed.append(outcome)
        return outcome

    async def _call(
        self,
        step: EnrollmentStep,
        completed: list[StepOutcome],
        func: Callable[..., StoreResult],
        *args: Any,
    ) -> StoreResult:
        """Issue one store call in a worker thread, bounded by the timeout."""
        logger.debug(f"Enrollment step {step.value} starting")
        try:
            return await run_blocking(func, *args, timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.error(f"Enrollment step {step.value} timed out after {self._timeout}s")
            raise EnrollmentTimeoutError(
                step.value,
                self._timeout,
                completed=[outcome.model_dump(mode="json") for outcome in completed],
            )


def _row_id(row: Optional[dict[str, Any]]) -> Optional[str]:
    if not row or row.get("id") is None:
        return None
    return str(row["id"])

"""
Fixtures for enrollment tests.

InMemoryEnrollmentStore is a thread-safe stand-in for the Supabase store.
The coordinator runs store calls in worker threads, so concurrent
enrollments really do interleave here.
"""

import threading
import time
import uuid
from typing import Optional

import pytest

from modules.enrollment.exceptions import DuplicatePaymentError
from modules.enrollment.models import EnrollmentRecord, PaymentRecord, StoreResult


class InMemoryEnrollmentStore:
    """
    IEnrollmentStore backed by dicts and a single lock.

    Like the payments table, transaction IDs are unique when present.
    """

    def __init__(self, latency: float = 0.0):
        self._lock = threading.Lock()
        self._latency = latency
        self.classes: dict[str, dict] = {}
        self.payments: list[dict] = []
        self.enrollments: list[dict] = []
        self.cart: list[dict] = []
        self.calls: list[str] = []

    def add_class(self, class_id: str, seats: int) -> None:
        self.classes[class_id] = {"id": class_id, "available_seats": seats}

    def add_to_cart(self, class_id: str, email: str) -> None:
        self.cart.append({"class_id": class_id, "user_email": email})

    def insert_payment(self, payment: PaymentRecord) -> StoreResult:
        row = {**payment.model_dump(mode="json"), "id": str(uuid.uuid4())}
        with self._lock:
            self.calls.append("insert_payment")
            if payment.transaction_id and any(
                p.get("transaction_id") == payment.transaction_id for p in self.payments
            ):
                raise DuplicatePaymentError(payment.transaction_id)
            self.payments.append(row)
        return StoreResult(matched=True, data=row)

    def insert_enrollment(self, enrollment: EnrollmentRecord) -> StoreResult:
        row = {**enrollment.model_dump(mode="json"), "id": str(uuid.uuid4())}
        with self._lock:
            self.calls.append("insert_enrollment")
            self.enrollments.append(row)
        return StoreResult(matched=True, data=row)

    def increment_class_field(
        self,
        class_id: str,
        field: str = "available_seats",
        delta: int = -1,
    ) -> StoreResult:
        with self._lock:
            self.calls.append("increment_class_field")
            row = self.classes.get(class_id)
            if row is None or row[field] + delta < 0:
                return StoreResult(matched=False)
            current = row[field]
            # Widen the window a racy read-modify-write would lose updates in
            time.sleep(self._latency)
            row[field] = current + delta
            return StoreResult(matched=True, data=dict(row))

    def delete_cart_entry(self, class_id: str, email: str) -> StoreResult:
        with self._lock:
            self.calls.append("delete_cart_entry")
            for index, entry in enumerate(self.cart):
                if entry["class_id"] == class_id and entry["user_email"] == email:
                    return StoreResult(matched=True, data=self.cart.pop(index))
        return StoreResult(matched=False)

    def list_enrollments(self, email: Optional[str] = None) -> list[EnrollmentRecord]:
        with self._lock:
            rows = [row for row in self.enrollments if email is None or row["email"] == email]
        return [EnrollmentRecord(**row) for row in rows]


@pytest.fixture
def store() -> InMemoryEnrollmentStore:
    return InMemoryEnrollmentStore()


@pytest.fixture
def slow_store() -> InMemoryEnrollmentStore:
    return InMemoryEnrollmentStore(latency=0.005)

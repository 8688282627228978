"""
Enrollment repository for database access.

Encapsulates the Supabase writes behind the enrollment coordinator:
- payments (append-only)
- enrolled (append-only)
- classes.available_seats (atomic adjust via the adjust_available_seats function)
- cart (delete by class and user)
"""

from typing import Optional

from postgrest.exceptions import APIError

from shared.database import is_unique_violation
from shared.repository import BaseRepository
from modules.classes.repository import CART_TABLE

from .models import EnrollmentRecord, PaymentRecord, StoreResult
from .exceptions import DuplicatePaymentError

PAYMENTS_TABLE = "payments"
ENROLLED_TABLE = "enrolled"

# Postgres functions that apply a delta in a single UPDATE, keyed by field name.
# See migrations/001_initial_schema.sql.
COUNTER_FUNCTIONS = {
    "available_seats": "adjust_available_seats",
}


class EnrollmentRepository(BaseRepository[EnrollmentRecord]):
    """
    Repository implementing IEnrollmentStore on Supabase.

    Every method is a single round-trip. Exceptions from the client
    propagate to the coordinator, which decides whether they are fatal.
    """

    def insert_payment(self, payment: PaymentRecord) -> StoreResult:
        """
        Append a payment record.

        Raises:
            DuplicatePaymentError: The transaction ID is already recorded
        """
        data = payment.model_dump(mode="json", exclude_none=True)
        try:
            result = self._db.table(PAYMENTS_TABLE).insert(data).execute()
        except APIError as e:
            if is_unique_violation(e) and payment.transaction_id:
                raise DuplicatePaymentError(payment.transaction_id) from e
            raise
        return StoreResult(matched=bool(result.data), data=self._first(result.data))

    def insert_enrollment(self, enrollment: EnrollmentRecord) -> StoreResult:
        """Append an enrollment record."""
        data = enrollment.model_dump(mode="json", exclude_none=True)
        result = self._db.table(ENROLLED_TABLE).insert(data).execute()
        return StoreResult(matched=bool(result.data), data=self._first(result.data))

    def increment_class_field(
        self,
        class_id: str,
        field: str = "available_seats",
        delta: int = -1,
    ) -> StoreResult:
        """
        Atomically add delta to a class counter.

        The database function returns the updated row, or nothing when the
        class is missing or the counter would drop below zero.
        """
        function = COUNTER_FUNCTIONS.get(field)
        if function is None:
            raise ValueError(f"Unsupported counter field: {field}")

        result = self._db.rpc(function, {"p_class_id": class_id, "p_delta": delta}).execute()
        rows = result.data or []
        if isinstance(rows, dict):
            rows = [rows]
        return StoreResult(matched=bool(rows), data=self._first(rows))

    def delete_cart_entry(self, class_id: str, email: str) -> StoreResult:
        """Delete the cart entry for (class_id, email)."""
        result = (
            self._db.table(CART_TABLE)
            .delete()
            .eq("class_id", class_id)
            .eq("user_email", email)
            .execute()
        )
        return StoreResult(matched=bool(result.data), data=self._first(result.data))

    def list_enrollments(self, email: Optional[str] = None) -> list[EnrollmentRecord]:
        """List enrollment records, most recent first."""
        query = self._db.table(ENROLLED_TABLE).select("*")
        if email:
            query = query.eq("email", email)
        result = query.order("enrolled_at", desc=True).execute()
        return [self._map_to_enrollment(row) for row in result.data]

    def _map_to_enrollment(self, row: dict) -> EnrollmentRecord:
        return EnrollmentRecord(
            id=str(row["id"]) if row.get("id") is not None else None,
            class_id=str(row["class_id"]),
            email=row["email"],
            payment_id=str(row["payment_id"]) if row.get("payment_id") is not None else None,
            enrolled_at=row["enrolled_at"],
        )

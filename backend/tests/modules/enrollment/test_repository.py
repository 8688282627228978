"""Tests for EnrollmentRepository."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.enrollment.exceptions import DuplicatePaymentError
from modules.enrollment.models import EnrollmentRecord, PaymentRecord
from modules.enrollment.repository import EnrollmentRepository


class TestEnrollmentRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return EnrollmentRepository(mock_db)

    def test_insert_payment(self, repo, mock_db):
        insert = mock_db.table.return_value.insert
        insert.return_value.execute.return_value.data = [{"id": "p1", "amount": 2000}]

        result = repo.insert_payment(
            PaymentRecord(class_id="C1", email="u@x.com", amount=2000)
        )

        assert result.matched is True
        assert result.data == {"id": "p1", "amount": 2000}
        mock_db.table.assert_called_with("payments")
        inserted = insert.call_args[0][0]
        assert "id" not in inserted
        assert inserted["amount"] == 2000
        assert inserted["currency"] == "usd"

    def test_insert_payment_replayed_transaction(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value", "details": None, "hint": None}
        )

        with pytest.raises(DuplicatePaymentError) as exc_info:
            repo.insert_payment(
                PaymentRecord(class_id="C1", email="u@x.com", amount=2000, transaction_id="pi_1")
            )

        assert exc_info.value.transaction_id == "pi_1"
        assert exc_info.value.status_code == 409

    def test_insert_payment_unique_violation_without_transaction(self, repo, mock_db):
        """Without a transaction ID there is nothing to call a replay."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value", "details": None, "hint": None}
        )

        with pytest.raises(APIError):
            repo.insert_payment(PaymentRecord(class_id="C1", email="u@x.com", amount=2000))

    def test_insert_payment_other_database_error(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "22P02", "message": "invalid input syntax", "details": None, "hint": None}
        )

        with pytest.raises(APIError):
            repo.insert_payment(
                PaymentRecord(class_id="C1", email="u@x.com", amount=2000, transaction_id="pi_1")
            )

    def test_insert_enrollment(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [{"id": "e1"}]

        result = repo.insert_enrollment(
            EnrollmentRecord(class_id="C1", email="u@x.com", payment_id="p1")
        )

        assert result.matched is True
        mock_db.table.assert_called_with("enrolled")

    def test_increment_calls_database_function(self, repo, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = [{"id": "C1", "available_seats": 4}]

        result = repo.increment_class_field("C1", "available_seats", -1)

        assert result.matched is True
        assert result.data == {"id": "C1", "available_seats": 4}
        mock_db.rpc.assert_called_once_with(
            "adjust_available_seats", {"p_class_id": "C1", "p_delta": -1}
        )

    def test_increment_accepts_single_row(self, repo, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = {"id": "C1", "available_seats": 4}

        result = repo.increment_class_field("C1")

        assert result.matched is True
        assert result.data["available_seats"] == 4

    def test_increment_no_match(self, repo, mock_db):
        """An empty result means no class or no seat left."""
        mock_db.rpc.return_value.execute.return_value.data = []

        result = repo.increment_class_field("C1")

        assert result.matched is False
        assert result.data is None

    def test_increment_unsupported_field(self, repo, mock_db):
        with pytest.raises(ValueError, match="Unsupported counter field"):
            repo.increment_class_field("C1", "price", 1)

        mock_db.rpc.assert_not_called()

    def test_delete_cart_entry(self, repo, mock_db):
        delete = mock_db.table.return_value.delete
        delete.return_value.eq.return_value.eq.return_value.execute.return_value.data = [
            {"class_id": "C1", "user_email": "u@x.com"}
        ]

        result = repo.delete_cart_entry("C1", "u@x.com")

        assert result.matched is True
        mock_db.table.assert_called_with("cart")
        delete.return_value.eq.assert_called_once_with("class_id", "C1")
        delete.return_value.eq.return_value.eq.assert_called_once_with("user_email", "u@x.com")

    def test_delete_cart_entry_no_match(self, repo, mock_db):
        delete = mock_db.table.return_value.delete
        delete.return_value.eq.return_value.eq.return_value.execute.return_value.data = []

        assert repo.delete_cart_entry("C1", "u@x.com").matched is False

    def test_list_enrollments_for_user(self, repo, mock_db):
        select = mock_db.table.return_value.select
        select.return_value.eq.return_value.order.return_value.execute.return_value.data = [
            {
                "id": 7,
                "class_id": "C1",
                "email": "u@x.com",
                "payment_id": 3,
                "enrolled_at": "2024-01-01T00:00:00+00:00",
            }
        ]

        records = repo.list_enrollments("u@x.com")

        assert len(records) == 1
        assert records[0].id == "7"
        assert records[0].payment_id == "3"
        select.return_value.eq.assert_called_once_with("email", "u@x.com")
        select.return_value.eq.return_value.order.assert_called_once_with("enrolled_at", desc=True)

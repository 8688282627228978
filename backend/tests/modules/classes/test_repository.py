"""Tests for ClassRepository."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.classes.exceptions import DuplicateCartEntryError
from modules.classes.models import CartEntry, ClassStatus, CreateClassRequest
from modules.classes.repository import ClassRepository

CLASS_ROW = {
    "id": 42,
    "name": "Morning Flow",
    "instructor_email": "i@x.com",
    "available_seats": 5,
    "price": 2000,
    "status": "pending",
    "reason": None,
    "created_at": "2024-01-01T00:00:00+00:00",
}


class TestClassRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return ClassRepository(mock_db)

    def test_create_class_forces_pending(self, repo, mock_db):
        insert = mock_db.table.return_value.insert
        insert.return_value.execute.return_value.data = [CLASS_ROW]

        record = repo.create_class(
            CreateClassRequest(name="Morning Flow", available_seats=5, price=2000),
            "i@x.com",
        )

        inserted = insert.call_args[0][0]
        assert inserted["status"] == "pending"
        assert inserted["instructor_email"] == "i@x.com"
        assert record.id == "42"
        mock_db.table.assert_called_with("classes")

    def test_get_class_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        assert repo.get_class("C9") is None

    def test_update_status(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [
            {**CLASS_ROW, "status": "approved"}
        ]

        record = repo.update_status("42", ClassStatus.APPROVED)

        assert record.status == ClassStatus.APPROVED
        update.assert_called_once_with({"status": "approved", "reason": None})
        update.return_value.eq.assert_called_once_with("id", "42")

    def test_remove_cart_entry_matches_class_and_user(self, repo, mock_db):
        delete = mock_db.table.return_value.delete
        delete.return_value.eq.return_value.eq.return_value.execute.return_value.data = [
            {"class_id": "C1", "user_email": "u@x.com"}
        ]

        assert repo.remove_cart_entry("C1", "u@x.com") is True
        mock_db.table.assert_called_with("cart")
        delete.return_value.eq.assert_called_once_with("class_id", "C1")
        delete.return_value.eq.return_value.eq.assert_called_once_with("user_email", "u@x.com")

    def test_remove_cart_entry_no_match(self, repo, mock_db):
        delete = mock_db.table.return_value.delete
        delete.return_value.eq.return_value.eq.return_value.execute.return_value.data = []

        assert repo.remove_cart_entry("C1", "u@x.com") is False

    def test_add_cart_entry(self, repo, mock_db):
        entry = CartEntry(user_email="u@x.com", class_id="C1")
        insert = mock_db.table.return_value.insert
        insert.return_value.execute.return_value.data = [entry.model_dump(mode="json")]

        assert repo.add_cart_entry(entry) == entry

    def test_add_cart_entry_unique_violation(self, repo, mock_db):
        """A concurrent add that loses the unique-key race is a duplicate, not a crash."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value", "details": None, "hint": None}
        )

        with pytest.raises(DuplicateCartEntryError) as exc_info:
            repo.add_cart_entry(CartEntry(user_email="u@x.com", class_id="C1"))

        assert exc_info.value.details == {"class_id": "C1", "email": "u@x.com"}
        assert isinstance(exc_info.value.__cause__, APIError)

    def test_add_cart_entry_other_database_error(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23503", "message": "foreign key violation", "details": None, "hint": None}
        )

        with pytest.raises(APIError):
            repo.add_cart_entry(CartEntry(user_email="u@x.com", class_id="C1"))

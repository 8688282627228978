"""Tests for UserRepository."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.users.exceptions import DuplicateUserError
from modules.users.models import User
from modules.users.repository import UserRepository
from shared.models import UserRole


class TestUserRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return UserRepository(mock_db)

    def test_find_by_email(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            {"email": "a@x.com", "name": "Ann", "photo_url": None, "role": "instructor"}
        ]

        user = repo.find_by_email("a@x.com")

        assert user == User(email="a@x.com", name="Ann", role=UserRole.INSTRUCTOR)
        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with(
            "email", "a@x.com"
        )

    def test_find_by_email_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        assert repo.find_by_email("a@x.com") is None

    def test_find_by_email_without_role(self, repo, mock_db):
        """Rows with no role read as members."""
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            {"email": "a@x.com", "role": None}
        ]

        assert repo.find_by_email("a@x.com").role == UserRole.MEMBER

    def test_create(self, repo, mock_db):
        row = {"email": "a@x.com", "name": "Ann", "photo_url": None, "role": "member"}
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [row]

        user = repo.create(User(email="a@x.com", name="Ann"))

        assert user.email == "a@x.com"
        mock_db.table.return_value.insert.assert_called_once_with(row)

    def test_create_unique_violation(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value", "details": None, "hint": None}
        )

        with pytest.raises(DuplicateUserError):
            repo.create(User(email="a@x.com"))

    def test_set_role(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [
            {"email": "a@x.com", "role": "admin"}
        ]

        user = repo.set_role("a@x.com", UserRole.ADMIN)

        assert user.role == UserRole.ADMIN
        update.assert_called_once_with({"role": "admin"})
        update.return_value.eq.assert_called_once_with("email", "a@x.com")

    def test_set_role_no_match(self, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []

        assert repo.set_role("a@x.com", UserRole.ADMIN) is None

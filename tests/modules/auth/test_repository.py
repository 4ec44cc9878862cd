"""Tests for modules/auth/repository.py."""

import pytest
from unittest.mock import MagicMock

import httpx
from postgrest.exceptions import APIError

from modules.auth.exceptions import EmailAlreadyRegisteredError
from modules.auth.models import UserRecord
from modules.auth.repository import UserRepository, USERS_TABLE
from shared.exceptions import ServerError


def _row(**overrides):
    row = {
        "id": "user-123",
        "email": "test@example.com",
        "password_hash": "$2b$04$hash",
        "name": None,
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


class TestUserRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return UserRepository(mock_db)

    def test_get_by_email(self, repo, mock_db):
        """Should query users by email and map the row."""
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [_row()]

        user = repo.get_by_email("test@example.com")

        assert isinstance(user, UserRecord)
        assert user.id == "user-123"
        mock_db.table.assert_called_with(USERS_TABLE)
        mock_db.table.return_value.select.return_value.eq.assert_called_with(
            "email", "test@example.com"
        )

    def test_get_by_email_not_found(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = []

        assert repo.get_by_email("nobody@example.com") is None

    def test_get_by_id(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [_row(name="Alice")]

        user = repo.get_by_id("user-123")

        assert user.name == "Alice"

    def test_create(self, repo, mock_db):
        """Should insert the hash, never a plaintext password."""
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [_row()]

        user = repo.create("test@example.com", "$2b$04$hash", None)

        inserted = mock_db.table.return_value.insert.call_args[0][0]
        assert inserted == {"email": "test@example.com", "password_hash": "$2b$04$hash", "name": None}
        assert user.id == "user-123"

    def test_create_duplicate_email(self, repo, mock_db):
        """A unique violation should surface as a conflict."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value violates unique constraint"}
        )

        with pytest.raises(EmailAlreadyRegisteredError):
            repo.create("test@example.com", "$2b$04$hash")

    def test_create_other_store_error(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "42P01", "message": "relation does not exist"}
        )

        with pytest.raises(ServerError):
            repo.create("test@example.com", "$2b$04$hash")

    def test_create_store_unreachable(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = httpx.ConnectError(
            "connection refused"
        )

        with pytest.raises(ServerError):
            repo.create("test@example.com", "$2b$04$hash")

    def test_ping(self, repo, mock_db):
        repo.ping()
        mock_db.table.return_value.select.assert_called_with("id")

    def test_ping_failure(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.limit.return_value
        chain.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(ServerError):
            repo.ping()

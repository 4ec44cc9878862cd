"""Tests for modules/contacts/repository.py."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from modules.contacts.models import Contact
from modules.contacts.repository import ContactRepository, CONTACTS_TABLE
from shared.exceptions import ServerError
from shared.validation import ContactInput

CONTACT_ID = "0b7c1f7e-3f5d-4a59-9b8e-2f1d1c7d9a10"


def _row(**overrides):
    row = {
        "id": CONTACT_ID,
        "owner_id": "user-a",
        "name": "Bob",
        "email": "bob@example.com",
        "phone": "5551234567",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return ContactRepository(mock_db)


@pytest.fixture
def bob():
    return ContactInput(name="Bob", email="bob@example.com", phone="5551234567")


class TestListForOwner:
    def test_filters_by_owner(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.execute.return_value.data = [_row(), _row(id="other", name="Carol")]

        contacts = repo.list_for_owner("user-a")

        mock_db.table.assert_called_with(CONTACTS_TABLE)
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("owner_id", "user-a")
        mock_db.table.return_value.select.return_value.eq.return_value.order.assert_called_once_with(
            "created_at"
        )
        assert [c.name for c in contacts] == ["Bob", "Carol"]
        assert all(isinstance(c, Contact) for c in contacts)

    def test_empty(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.execute.return_value.data = []

        assert repo.list_for_owner("user-a") == []


class TestCreate:
    def test_sets_owner(self, repo, mock_db, bob):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [_row()]

        contact = repo.create("user-a", bob)

        inserted = mock_db.table.return_value.insert.call_args[0][0]
        assert inserted == {
            "name": "Bob",
            "email": "bob@example.com",
            "phone": "5551234567",
            "owner_id": "user-a",
        }
        assert contact.id == CONTACT_ID

    def test_store_failure(self, repo, mock_db, bob):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23514", "message": "check constraint"}
        )

        with pytest.raises(ServerError):
            repo.create("user-a", bob)


class TestUpdateOwned:
    def test_filters_on_id_and_owner(self, repo, mock_db, bob):
        """The ownership check and the write should be one statement."""
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.eq.return_value.execute.return_value.data = [
            _row(name="Bob")
        ]

        contact = repo.update_owned(CONTACT_ID, "user-a", bob)

        update.return_value.eq.assert_called_once_with("id", CONTACT_ID)
        update.return_value.eq.return_value.eq.assert_called_once_with("owner_id", "user-a")
        row = update.call_args[0][0]
        assert row["name"] == "Bob"
        assert "updated_at" in row
        assert "owner_id" not in row
        assert contact.name == "Bob"

    def test_no_match(self, repo, mock_db, bob):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.eq.return_value.execute.return_value.data = []

        assert repo.update_owned(CONTACT_ID, "user-b", bob) is None


class TestDeleteOwned:
    def test_deleted(self, repo, mock_db):
        delete = mock_db.table.return_value.delete
        delete.return_value.eq.return_value.eq.return_value.execute.return_value.data = [_row()]

        assert repo.delete_owned(CONTACT_ID, "user-a") is True
        delete.return_value.eq.assert_called_once_with("id", CONTACT_ID)
        delete.return_value.eq.return_value.eq.assert_called_once_with("owner_id", "user-a")

    def test_no_match(self, repo, mock_db):
        delete = mock_db.table.return_value.delete
        delete.return_value.eq.return_value.eq.return_value.execute.return_value.data = []

        assert repo.delete_owned(CONTACT_ID, "user-b") is False

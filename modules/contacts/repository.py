"""
Contact repository for database access.

Encapsulates all Supabase queries and data mapping for the ``contacts`` table.
Update and delete filter on ``id`` and ``owner_id`` in the same statement,
so the ownership check and the write cannot be separated by another request.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from shared.validation import ContactInput
from .models import Contact

CONTACTS_TABLE = "contacts"


class ContactRepository(BaseRepository[Contact]):
    """
    Repository for contact data access.

    All methods take the owner ID and include it in the query filter.
    """

    def list_for_owner(self, owner_id: str) -> list[Contact]:
        """
        List a user's contacts in insertion order.

        Args:
            owner_id: The owning user's ID.

        Returns:
            List of contacts (possibly empty).
        """
        query = (
            self._db.table(CONTACTS_TABLE)
            .select("*")
            .eq("owner_id", owner_id)
            .order("created_at")
        )
        result = self._execute(query, "list contacts")
        return [self._map_to_contact(row) for row in result.data]

    def create(self, owner_id: str, data: ContactInput) -> Contact:
        """
        Insert a contact for an owner.

        Args:
            owner_id: The owning user's ID.
            data: Validated contact fields.

        Returns:
            Created Contact with generated ID and timestamps.
        """
        row = {**data.model_dump(), "owner_id": owner_id}
        result = self._execute(self._db.table(CONTACTS_TABLE).insert(row), "create contact")
        return self._map_to_contact(result.data[0])

    def update_owned(
        self,
        contact_id: str,
        owner_id: str,
        data: ContactInput,
    ) -> Optional[Contact]:
        """
        Overwrite a contact's fields if it belongs to the owner.

        Args:
            contact_id: The contact UUID.
            owner_id: The caller's user ID.
            data: Full replacement fields.

        Returns:
            The updated contact, or None if no row matched id and owner.
        """
        row: dict[str, Any] = {
            **data.model_dump(),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        query = (
            self._db.table(CONTACTS_TABLE)
            .update(row)
            .eq("id", contact_id)
            .eq("owner_id", owner_id)
        )
        result = self._execute(query, "update contact")
        if not result.data:
            return None
        return self._map_to_contact(result.data[0])

    def delete_owned(self, contact_id: str, owner_id: str) -> bool:
        """
        Delete a contact if it belongs to the owner.

        Args:
            contact_id: The contact UUID.
            owner_id: The caller's user ID.

        Returns:
            True if a row was deleted, False if nothing matched.
        """
        query = (
            self._db.table(CONTACTS_TABLE)
            .delete()
            .eq("id", contact_id)
            .eq("owner_id", owner_id)
        )
        result = self._execute(query, "delete contact")
        return bool(result.data)

    def _map_to_contact(self, data: dict[str, Any]) -> Contact:
        """Map database row to Contact model."""
        return Contact(
            id=str(data["id"]),
            owner_id=str(data["owner_id"]),
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

"""
Contacts module interface.

The API layer depends on IContactService for all contact operations.
Every method takes the owner ID from the authenticated request.
"""

from typing import Protocol, runtime_checkable

from shared.validation import ContactInput

from .models import Contact


@runtime_checkable
class IContactService(Protocol):
    """
    Interface for owner-scoped contact operations.

    This protocol defines the contract that the contacts module exposes
    to the API layer.
    """

    async def list_contacts(self, owner_id: str) -> list[Contact]:
        """
        List all contacts owned by a user.

        Args:
            owner_id: Authenticated user ID

        Returns:
            Contacts in insertion order; empty list if none
        """
        ...

    async def create_contact(self, owner_id: str, data: ContactInput) -> Contact:
        """
        Create a contact owned by the caller.

        Args:
            owner_id: Authenticated user ID (the only source of ownership)
            data: Contact fields

        Returns:
            The stored contact with generated ID

        Raises:
            ValidationError: If data is invalid
        """
        ...

    async def update_contact(
        self,
        contact_id: str,
        owner_id: str,
        data: ContactInput,
    ) -> Contact:
        """
        Replace all fields of a contact owned by the caller.

        Args:
            contact_id: Contact UUID
            owner_id: Authenticated user ID
            data: Full replacement fields

        Returns:
            The updated contact

        Raises:
            ValidationError: If data is invalid
            ContactNotFoundError: If the contact doesn't exist or isn't owned
        """
        ...

    async def delete_contact(self, contact_id: str, owner_id: str) -> None:
        """
        Delete a contact owned by the caller.

        Args:
            contact_id: Contact UUID
            owner_id: Authenticated user ID

        Raises:
            ContactNotFoundError: If the contact doesn't exist or isn't owned
        """
        ...

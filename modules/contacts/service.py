"""
Contacts service implementation.

Owner-scoped CRUD over the contact repository. The owner ID always comes
from the caller's token, never from the payload.
"""

import logging
import uuid
from typing import Optional

from shared.database import get_supabase_client
from shared.validation import ContactInput, validate_contact

from .interfaces import IContactService
from .models import Contact
from .repository import ContactRepository
from .exceptions import ContactNotFoundError

logger = logging.getLogger(__name__)


def _is_valid_id(contact_id: str) -> bool:
    try:
        uuid.UUID(str(contact_id))
    except ValueError:
        return False
    return True


class ContactService(IContactService):
    """
    Contact service with Supabase backend.

    Implements IContactService protocol with real database operations.
    """

    def __init__(self, repository: Optional[ContactRepository] = None):
        self._repository = (
            repository if repository is not None else ContactRepository(get_supabase_client())
        )

    async def list_contacts(self, owner_id: str) -> list[Contact]:
        """List the caller's contacts."""
        return self._repository.list_for_owner(owner_id)

    async def create_contact(self, owner_id: str, data: ContactInput) -> Contact:
        """Validate and store a contact owned by the caller."""
        data = validate_contact(data)
        contact = self._repository.create(owner_id, data)
        logger.debug("Created contact %s for user %s", contact.id, owner_id)
        return contact

    async def update_contact(
        self,
        contact_id: str,
        owner_id: str,
        data: ContactInput,
    ) -> Contact:
        """Validate and fully replace a contact owned by the caller."""
        data = validate_contact(data)

        # Malformed IDs can't match any row; don't send them to the store
        if not _is_valid_id(contact_id):
            raise ContactNotFoundError(contact_id)

        contact = self._repository.update_owned(contact_id, owner_id, data)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    async def delete_contact(self, contact_id: str, owner_id: str) -> None:
        """Delete a contact owned by the caller."""
        if not _is_valid_id(contact_id):
            raise ContactNotFoundError(contact_id)

        if not self._repository.delete_owned(contact_id, owner_id):
            raise ContactNotFoundError(contact_id)
        logger.debug("Deleted contact %s for user %s", contact_id, owner_id)

"""
Contacts module.

Owner-scoped create, list, update and delete of address-book entries.

Public API:
- IContactService: Interface for contact operations
- Contact: Stored contact record
- ContactNotFoundError: Missing or not-owned contact
"""

from .interfaces import IContactService
from .models import Contact
from .exceptions import ContactNotFoundError

__all__ = [
    # Interface
    "IContactService",
    # Models
    "Contact",
    # Exceptions
    "ContactNotFoundError",
]

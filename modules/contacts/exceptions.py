"""
Contacts module exceptions.
"""

from shared.exceptions import NotFoundError


class ContactNotFoundError(NotFoundError):
    """
    Raised when a contact doesn't exist or belongs to another user.

    The two cases are indistinguishable to the caller.
    """

    def __init__(self, contact_id: str):
        super().__init__(
            "Contact not found",
            code="CONTACT_NOT_FOUND",
            details={"contact_id": contact_id},
        )

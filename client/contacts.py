"""
Client-side contact operations.

Input is validated with the same schema the server uses before any
request is made.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ValidationError
from shared.validation import validate_contact

from .auth import validation_failure
from .http import ApiClient, UNEXPECTED_RESPONSE_MESSAGE
from .results import ErrorKind, Failure, Ok, Result


class Contact(BaseModel):
    """A contact as returned by the API."""

    id: str
    owner_id: str
    name: str
    email: str
    phone: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _unexpected() -> Failure:
    return Failure(ErrorKind.SERVER, UNEXPECTED_RESPONSE_MESSAGE)


class ContactsClient:
    """CRUD over the current user's contacts."""

    def __init__(self, api: ApiClient):
        self._api = api

    def list_contacts(self) -> Result[list[Contact]]:
        result = self._api.request("GET", "/contacts")
        if isinstance(result, Failure):
            return result
        try:
            return Ok([Contact.model_validate(item) for item in result.value or []])
        except (PydanticValidationError, TypeError):
            return _unexpected()

    def create_contact(self, data: dict[str, Any]) -> Result[Contact]:
        try:
            contact = validate_contact(data)
        except ValidationError as e:
            return validation_failure(e)
        return self._single(self._api.request("POST", "/contacts", json=contact.model_dump()))

    def update_contact(self, contact_id: str, data: dict[str, Any]) -> Result[Contact]:
        """Replace all fields of a contact; partial updates are not supported."""
        try:
            contact = validate_contact(data)
        except ValidationError as e:
            return validation_failure(e)
        return self._single(
            self._api.request("PUT", f"/contacts/{contact_id}", json=contact.model_dump())
        )

    def delete_contact(self, contact_id: str) -> Result[None]:
        result = self._api.request("DELETE", f"/contacts/{contact_id}")
        if isinstance(result, Failure):
            return result
        return Ok(None)

    def _single(self, result: Result) -> Result[Contact]:
        if isinstance(result, Failure):
            return result
        try:
            return Ok(Contact.model_validate(result.value))
        except PydanticValidationError:
            return _unexpected()

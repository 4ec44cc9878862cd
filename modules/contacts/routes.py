"""
Contact API endpoints.

Every route requires a bearer token; the owner is always the
authenticated user. Domain errors are translated by api.errors.
"""

from fastapi import APIRouter, Depends, Response, status

from api.middleware.auth import get_current_user
from api.dependencies import get_contact_service
from shared.models import AuthenticatedUser
from shared.validation import ContactInput

from .interfaces import IContactService
from .models import Contact

router = APIRouter()


@router.get("", response_model=list[Contact])
async def list_contacts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IContactService = Depends(get_contact_service),
) -> list[Contact]:
    """List the current user's contacts."""
    return await service.list_contacts(user.id)


@router.post("", response_model=Contact, status_code=status.HTTP_201_CREATED)
async def create_contact(
    data: ContactInput,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IContactService = Depends(get_contact_service),
) -> Contact:
    """
    Create a contact.

    Any owner field in the body is ignored.
    """
    return await service.create_contact(user.id, data)


@router.put("/{contact_id}", response_model=Contact)
async def update_contact(
    contact_id: str,
    data: ContactInput,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IContactService = Depends(get_contact_service),
) -> Contact:
    """
    Replace a contact's name, email and phone.

    Returns 404 when the contact doesn't exist or belongs to someone else.
    """
    return await service.update_contact(contact_id, user.id, data)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IContactService = Depends(get_contact_service),
) -> Response:
    """
    Delete a contact.

    Returns 404 when the contact doesn't exist or belongs to someone else.
    """
    await service.delete_contact(contact_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

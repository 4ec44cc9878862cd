"""
Contacts module data models.

Input validation lives in shared.validation.ContactInput so the client
can apply it before submitting; this module only defines stored records.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Contact(BaseModel):
    """An address-book entry owned by exactly one user."""

    id: str = Field(..., description="Contact ID (UUID)")
    owner_id: str = Field(..., description="ID of the owning user; never changes")
    name: str
    email: str
    phone: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from session token claims and made available
    to route handlers via dependency injection. It is the only source of
    owner identity for contact operations.
    """

    id: str = Field(..., description="User ID (subject of the session token)")
    issued_at: Optional[datetime] = Field(None, description="Token issuance time")
    expires_at: Optional[datetime] = Field(None, description="Token expiry time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }

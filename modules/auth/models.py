"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr


class JWTPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class UserRecord(BaseModel):
    """
    A stored user row, including the password hash.

    Never returned from the API; use ``to_public()``.
    """

    id: str
    email: EmailStr
    password_hash: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_public(self) -> "User":
        """Project the record onto the public user model."""
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            created_at=self.created_at,
        )


class User(BaseModel):
    """Public user profile."""

    id: str = Field(..., description="User ID (UUID)")
    email: EmailStr = Field(..., description="Email address")
    name: Optional[str] = Field(None, description="Display name")
    created_at: Optional[datetime] = Field(None, description="Account creation time")


class TokenResponse(BaseModel):
    """Session token returned by login and register."""

    token: str = Field(..., description="Bearer token valid for 24 hours")

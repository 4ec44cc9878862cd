"""
Authentication module.

Handles login, registration, session tokens and password hashing.

Public API:
- IAuthService: Interface for auth operations
- User, TokenResponse: Public models
- Auth exceptions: InvalidCredentialsError, EmailAlreadyRegisteredError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload, TokenResponse, User, UserRecord
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    "TokenResponse",
    "User",
    "UserRecord",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
]

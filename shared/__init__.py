"""
Shared infrastructure for the Contact Book backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- validation: Input schemas shared with the client

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ContactBookError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    ServerError,
)
from .models import AuthenticatedUser
from .validation import (
    LoginInput,
    RegisterInput,
    ContactInput,
    validate_login,
    validate_register,
    validate_contact,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ContactBookError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "ServerError",
    "AuthenticatedUser",
    "LoginInput",
    "RegisterInput",
    "ContactInput",
    "validate_login",
    "validate_register",
    "validate_contact",
]

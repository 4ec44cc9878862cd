"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap implementations through ``app.dependency_overrides`` or by
setting the container's private attributes.
"""

import logging
from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.contacts.interfaces import IContactService
    from modules.contacts.repository import ContactRepository

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._contact_service: "IContactService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._contact_repository: "ContactRepository | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def contact_repository(self) -> "ContactRepository":
        """Get the contact repository instance."""
        if self._contact_repository is None:
            from modules.contacts.repository import ContactRepository
            from shared.database import get_supabase_client
            self._contact_repository = ContactRepository(get_supabase_client())
        return self._contact_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(users=self.user_repository)
        return self._auth_service

    @property
    def contacts(self) -> "IContactService":
        """Get the contact service instance."""
        if self._contact_service is None:
            from modules.contacts.service import ContactService
            self._contact_service = ContactService(repository=self.contact_repository)
        return self._contact_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._contact_service = None
        self._user_repository = None
        self._contact_repository = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_contact_service() -> "IContactService":
    """FastAPI dependency for contact service."""
    return get_container().contacts


def get_user_repository() -> "UserRepository | None":
    """
    FastAPI dependency for the user repository.

    Returns None when the database connection is not configured.
    """
    try:
        return get_container().user_repository
    except RuntimeError as e:
        logger.warning("User repository unavailable: %s", e)
        return None

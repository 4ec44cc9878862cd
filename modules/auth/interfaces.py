"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes and keeps the API layer storage-agnostic.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from shared.validation import LoginInput, RegisterInput

from .models import TokenResponse, User


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def login(self, credentials: LoginInput) -> TokenResponse:
        """
        Verify credentials and issue a session token.

        Args:
            credentials: Validated email and password

        Returns:
            TokenResponse with a token valid for 24 hours

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
                (both cases raise the same error)
        """
        ...

    async def register(self, registration: RegisterInput) -> TokenResponse:
        """
        Create an account and issue a session token.

        Args:
            registration: Validated email, password and optional name

        Returns:
            TokenResponse for the new user

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Args:
            token: Bearer token from the Authorization header

        Returns:
            AuthenticatedUser with the token subject as ID

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user's public profile by their ID.

        Args:
            user_id: User ID (UUID)

        Returns:
            User if found, None otherwise
        """
        ...

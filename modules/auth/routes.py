"""
Authentication API endpoints.

Login and registration are public; /me requires a bearer token.
Domain errors are translated to HTTP responses by api.errors.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser
from shared.validation import LoginInput, RegisterInput

from .interfaces import IAuthService
from .models import TokenResponse, User
from .exceptions import InvalidTokenError

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: LoginInput,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange email and password for a session token.

    Returns 401 "Invalid credentials" for both unknown emails and wrong
    passwords.
    """
    return await service.login(credentials)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    registration: RegisterInput,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Create an account and return a session token.

    Returns 400 "Email already registered" if the email is taken.
    """
    return await service.register(registration)


@router.get("/me", response_model=User)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> User:
    """Get the current user's profile."""
    profile = await service.get_user_by_id(user.id)
    if profile is None:
        # Token subject no longer maps to an account
        raise InvalidTokenError()
    return profile

"""
Authentication service implementation.

Issues and validates HS256 session tokens and manages user accounts
stored in Supabase.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.exceptions import ServerError
from shared.models import AuthenticatedUser
from shared.validation import LoginInput, RegisterInput, validate_login, validate_register

from .interfaces import IAuthService
from .models import JWTPayload, TokenResponse, User
from .passwords import PasswordHasher
from .repository import UserRepository
from .exceptions import (
    EmailAlreadyRegisteredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

# Tokens are not configurable in lifetime; expiry is the only way a session ends
TOKEN_LIFETIME = timedelta(hours=24)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Stores users in the Supabase ``users`` table and signs session tokens
    with the configured JWT secret.
    """

    def __init__(
        self,
        users: Optional[UserRepository] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        self._settings = get_settings()
        self._users = users if users is not None else UserRepository(get_supabase_client())
        self._hasher = hasher if hasher is not None else PasswordHasher(self._settings.bcrypt_rounds)

    async def login(self, credentials: LoginInput) -> TokenResponse:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same error after the
        same amount of hashing work.
        """
        credentials = validate_login(credentials)

        user = self._users.get_by_email(credentials.email)
        if user is None:
            await run_in_threadpool(self._hasher.verify_dummy, credentials.password)
            logger.debug("Login failed: no account for %s", credentials.email)
            raise InvalidCredentialsError()

        if not await run_in_threadpool(self._hasher.verify, credentials.password, user.password_hash):
            logger.debug("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError()

        return TokenResponse(token=self.create_token(user.id))

    async def register(self, registration: RegisterInput) -> TokenResponse:
        """
        Create a user and issue a token.

        The existence check here only short-circuits the common case; the
        repository maps the store's unique violation to the same error.
        """
        registration = validate_register(registration)
        self._signing_secret("issue token")

        if self._users.get_by_email(registration.email) is not None:
            raise EmailAlreadyRegisteredError()

        password_hash = await run_in_threadpool(self._hasher.hash, registration.password)
        user = self._users.create(
            email=registration.email,
            password_hash=password_hash,
            name=registration.name,
        )
        logger.info("Registered user %s", user.id)

        return TokenResponse(token=self.create_token(user.id))

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Signature and expiry are both checked; a token past its ``exp``
        is rejected even when the signature is valid. A missing server
        secret is a ServerError (500), not a rejected token.
        """
        if not token:
            raise MissingTokenError()

        secret = self._signing_secret("validate token")

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            claims = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError()
        except PydanticValidationError:
            raise InvalidTokenError()

        return AuthenticatedUser(
            id=claims.sub,
            issued_at=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(claims.exp, tz=timezone.utc),
        )

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Get a user's public profile."""
        record = self._users.get_by_id(user_id)
        if record is None:
            return None
        return record.to_public()

    def create_token(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Mint a session token for a user.

        Args:
            user_id: Token subject
            now: Issuance time (defaults to the current time)

        Returns:
            Encoded JWT expiring TOKEN_LIFETIME after issuance
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + TOKEN_LIFETIME).timestamp()),
        }
        return jwt.encode(
            payload,
            self._signing_secret("issue token"),
            algorithm=self._settings.jwt_algorithm,
        )

    def _signing_secret(self, operation: str) -> str:
        secret = self._settings.jwt_secret
        if not secret:
            logger.error("JWT_SECRET is not set; cannot %s", operation)
            raise ServerError(operation, cause="JWT secret not configured")
        return secret


"""
Client-side authentication.

Validates credentials locally, exchanges them for a token and keeps the
credential store up to date. A failed or unreachable server never logs
the user in.
"""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ValidationError
from shared.validation import validate_login, validate_register

from .credentials import Credentials, UserProfile
from .http import ApiClient, SESSION_EXPIRED_MESSAGE, UNEXPECTED_RESPONSE_MESSAGE
from .results import ErrorKind, Failure, Ok, Result, describe_field_errors


def validation_failure(error: ValidationError) -> Failure:
    """Convert a local validation error into a Failure."""
    errors = error.details.get("errors", [])
    return Failure(
        ErrorKind.VALIDATION,
        describe_field_errors(errors, error.message),
        errors=errors,
    )


class AuthClient:
    """Login, registration and session state for the client."""

    def __init__(self, api: ApiClient):
        self._api = api

    @property
    def is_authenticated(self) -> bool:
        return self._api.store.get() is not None

    def current_user(self) -> Optional[UserProfile]:
        """Cached profile of the logged-in user, if any."""
        credentials = self._api.store.get()
        return credentials.user if credentials else None

    def login(self, email: str, password: str) -> Result[Credentials]:
        """Log in and store the session."""
        try:
            credentials = validate_login({"email": email, "password": password})
        except ValidationError as e:
            return validation_failure(e)

        result = self._api.request(
            "POST",
            "/auth/login",
            json=credentials.model_dump(),
            authenticated=False,
        )
        return self._start_session(result)

    def register(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> Result[Credentials]:
        """Create an account and store the session."""
        try:
            registration = validate_register({"email": email, "password": password, "name": name})
        except ValidationError as e:
            return validation_failure(e)

        result = self._api.request(
            "POST",
            "/auth/register",
            json=registration.model_dump(exclude_none=True),
            authenticated=False,
        )
        return self._start_session(result)

    def logout(self) -> None:
        """Forget the stored session."""
        self._api.store.clear()

    def refresh_profile(self) -> Result[UserProfile]:
        """Fetch the current user's profile and cache it with the token."""
        result = self._api.request("GET", "/auth/me")
        if isinstance(result, Failure):
            return result

        try:
            profile = UserProfile.model_validate(result.value)
        except PydanticValidationError:
            return Failure(ErrorKind.SERVER, UNEXPECTED_RESPONSE_MESSAGE)

        credentials = self._api.store.get()
        if credentials is not None:
            self._api.store.set(credentials.model_copy(update={"user": profile}))
        return Ok(profile)

    def _start_session(self, result: Result) -> Result[Credentials]:
        if isinstance(result, Failure):
            return result

        token = result.value.get("token") if isinstance(result.value, dict) else None
        if not token:
            return Failure(ErrorKind.SERVER, UNEXPECTED_RESPONSE_MESSAGE)

        self._api.store.set(Credentials(token=token))
        # The token stays valid if the profile fetch fails for any reason but 401
        profile = self.refresh_profile()
        if isinstance(profile, Failure) and profile.kind == ErrorKind.UNAUTHENTICATED:
            return profile

        credentials = self._api.store.get()
        if credentials is None:
            return Failure(ErrorKind.UNAUTHENTICATED, SESSION_EXPIRED_MESSAGE, status=401)
        return Ok(credentials)

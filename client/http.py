"""
HTTP wrapper used by every client call.

Attaches the stored bearer token, turns responses into typed results and
is the single place where an expired session is noticed: a 401 on a
protected request clears the credential store and fires the
``on_unauthenticated`` callback.
"""

import logging
from typing import Any, Callable, Optional

import httpx

from .config import get_client_settings
from .credentials import CredentialStore, FileCredentialStore
from .results import ErrorKind, Failure, Ok, Result, describe_field_errors

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."
NETWORK_ERROR_MESSAGE = "Unable to reach the server. Check your connection and try again."
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"


class ApiClient:
    """
    JSON API client with bearer authentication.

    Args:
        base_url: API root (e.g. "http://localhost:8000/api"); overrides
            CONTACTBOOK_BASE_URL
        store: Credential store; defaults to a file store at
            CONTACTBOOK_CREDENTIALS_PATH
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests use httpx.MockTransport)
        on_unauthenticated: Called after a 401 has cleared the session
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        store: Optional[CredentialStore] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        on_unauthenticated: Optional[Callable[[], None]] = None,
    ):
        settings = get_client_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.store = store if store is not None else FileCredentialStore(settings.credentials_path)
        self._on_unauthenticated = on_unauthenticated
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        authenticated: bool = True,
    ) -> Result[Any]:
        """
        Send a request and return the decoded body as a result.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            json: Optional JSON body
            authenticated: Attach the stored token and treat 401 as session expiry

        Returns:
            Ok(decoded JSON or None for empty bodies) or Failure
        """
        headers: dict[str, str] = {}
        if authenticated:
            credentials = self.store.get()
            if credentials is not None:
                headers["Authorization"] = f"Bearer {credentials.token}"

        path = path if path.startswith("/") else f"/{path}"
        try:
            response = self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return Failure(ErrorKind.NETWORK, NETWORK_ERROR_MESSAGE)

        if response.status_code == 401 and authenticated:
            self._expire_session()
            return Failure(ErrorKind.UNAUTHENTICATED, SESSION_EXPIRED_MESSAGE, status=401)

        if response.is_error:
            return self._failure(response)

        if response.status_code == 204 or not response.content:
            return Ok(None)
        if "application/json" not in response.headers.get("content-type", ""):
            return Ok(None)
        try:
            return Ok(response.json())
        except ValueError:
            logger.warning("%s %s returned malformed JSON", method, path)
            return Failure(ErrorKind.SERVER, UNEXPECTED_RESPONSE_MESSAGE, status=response.status_code)

    def _expire_session(self) -> None:
        self.store.clear()
        if self._on_unauthenticated is not None:
            self._on_unauthenticated()

    def _failure(self, response: httpx.Response) -> Failure:
        """Normalize an error response into a Failure."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        code = body.get("code")
        errors = body.get("errors") or []
        message = body.get("detail") or body.get("message")
        if not isinstance(message, str):
            message = f"Request failed with status: {response.status_code}"
        if errors:
            message = describe_field_errors(errors, message)

        return Failure(
            kind=_kind_for(response.status_code, code),
            message=" ".join(message.split()),
            status=response.status_code,
            errors=errors,
        )


def _kind_for(status: int, code: Optional[str]) -> ErrorKind:
    if code == "EMAIL_EXISTS" or status == 409:
        return ErrorKind.CONFLICT
    if status == 401:
        return ErrorKind.INVALID_CREDENTIALS
    if status == 404:
        return ErrorKind.NOT_FOUND
    if status in (400, 422):
        return ErrorKind.VALIDATION
    return ErrorKind.SERVER

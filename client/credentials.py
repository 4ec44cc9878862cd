"""
Credential storage for the client.

Holds the session token and cached user profile between runs. Populated
on login or register; cleared on logout and whenever the server answers
a protected request with 401.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

# Owner read/write only
FILE_MODE = 0o600


class UserProfile(BaseModel):
    """Cached profile of the logged-in user."""

    id: str
    email: str
    name: Optional[str] = None


class Credentials(BaseModel):
    """A stored session."""

    token: str
    user: Optional[UserProfile] = None


@runtime_checkable
class CredentialStore(Protocol):
    """Storage for the current session."""

    def get(self) -> Optional[Credentials]:
        """Return the stored credentials, or None when logged out."""
        ...

    def set(self, credentials: Credentials) -> None:
        """Replace the stored credentials."""
        ...

    def clear(self) -> None:
        """Forget the stored credentials."""
        ...


class MemoryCredentialStore(CredentialStore):
    """Keeps credentials in memory for the life of the process."""

    def __init__(self, credentials: Optional[Credentials] = None):
        self._credentials = credentials

    def get(self) -> Optional[Credentials]:
        return self._credentials

    def set(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def clear(self) -> None:
        self._credentials = None


class FileCredentialStore(CredentialStore):
    """
    Persists credentials as JSON in a file readable only by the owner.

    An unreadable or corrupt file is treated as logged out.
    """

    def __init__(self, path: Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> Optional[Credentials]:
        if not self._path.exists():
            return None
        try:
            return Credentials.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as e:
            logger.warning("Ignoring unreadable credentials file %s: %s", self._path, e)
            return None

    def set(self, credentials: Credentials) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        # A leftover temp file would keep its old mode through O_CREAT
        tmp_path.unlink(missing_ok=True)
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(credentials.model_dump_json())
        os.replace(tmp_path, self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)

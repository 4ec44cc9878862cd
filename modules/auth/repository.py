"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
The table carries a unique constraint on ``email``; that constraint, not the
service's pre-check, is what keeps concurrent registrations from both
succeeding.
"""

from typing import Optional, Any

import httpx
from postgrest.exceptions import APIError

from shared.repository import BaseRepository, UNIQUE_VIOLATION
from .exceptions import EmailAlreadyRegisteredError
from .models import UserRecord

USERS_TABLE = "users"


class UserRepository(BaseRepository[UserRecord]):
    """Repository for user accounts."""

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a user by email.

        Args:
            email: Login email.

        Returns:
            The stored user, or None if no account uses this email.
        """
        query = self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1)
        result = self._execute(query, "get user by email")
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID, or None if it doesn't exist."""
        query = self._db.table(USERS_TABLE).select("*").eq("id", user_id).limit(1)
        result = self._execute(query, "get user by id")
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(
        self,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
    ) -> UserRecord:
        """
        Insert a new user.

        Args:
            email: Login email (must be unique).
            password_hash: bcrypt hash of the password.
            name: Optional display name.

        Returns:
            The created user with generated ID.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken.
            ServerError: On any other store failure.
        """
        data: dict[str, Any] = {
            "email": email,
            "password_hash": password_hash,
            "name": name,
        }
        try:
            result = self._db.table(USERS_TABLE).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError() from e
            raise self._server_error("create user", e) from e
        except httpx.HTTPError as e:
            raise self._server_error("create user", e) from e
        return self._map_to_user(result.data[0])

    def ping(self) -> None:
        """
        Run a trivial query to confirm the store is reachable.

        Raises:
            ServerError: If the store cannot be queried.
        """
        self._execute(self._db.table(USERS_TABLE).select("id").limit(1), "ping")

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            name=data.get("name"),
            created_at=data.get("created_at"),
        )

"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating store failures into ServerError.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ServerError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() to run a query and translate store failures

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ContactRepository(BaseRepository[Contact]):
            def list_for_owner(self, owner_id: str) -> list[Contact]:
                query = self._db.table("contacts").select("*").eq("owner_id", owner_id)
                result = self._execute(query, "list contacts")
                return [self._map_to_contact(row) for row in result.data]
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a query builder, converting store errors into ServerError.

        Args:
            query: A PostgREST query builder ready to execute.
            operation: Short description used in logs.

        Returns:
            The PostgREST response.

        Raises:
            ServerError: If the store rejects the query or is unreachable.
        """
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            raise self._server_error(operation, e) from e

    @staticmethod
    def _server_error(operation: str, error: Exception) -> ServerError:
        """Log a store failure and build the ServerError to raise."""
        logger.error("Database error during %s: %s", operation, error)
        return ServerError(operation, cause=str(error))

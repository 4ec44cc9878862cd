"""
Base exception classes for the Contact Book backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to one HTTP status, so the class a module
raises decides what the caller sees.
"""

from typing import Optional, Any


class ContactBookError(Exception):
    """
    Base exception for all Contact Book errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ContactBookError):
    """Resource not found (or not owned by the caller)."""

    pass


class ValidationError(ContactBookError):
    """Input validation failed."""

    def __init__(
        self,
        message: str = "Invalid input data",
        code: Optional[str] = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class AuthenticationError(ContactBookError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConflictError(ContactBookError):
    """Resource already exists."""

    pass


class ServerError(ContactBookError):
    """
    Persistence or unexpected failure.

    The message is always generic; the cause is kept in ``details`` for
    logging and never sent to the caller.
    """

    def __init__(
        self,
        operation: str,
        cause: Optional[str] = None,
    ):
        super().__init__(
            "Server error",
            code="SERVER_ERROR",
            details={"operation": operation, "cause": cause},
        )
        self.operation = operation

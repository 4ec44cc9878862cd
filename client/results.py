"""
Typed results for client operations.

Client calls never raise for expected failures. They return ``Ok(value)``
or ``Failure(kind, message)`` and callers match on the result:

    match contacts.list_contacts():
        case Ok(items):
            show(items)
        case Failure(kind=ErrorKind.UNAUTHENTICATED):
            prompt_login()
        case Failure(message=message):
            print(message)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced to client callers."""

    VALIDATION = "validation"                    # Input rejected (client or server side)
    UNAUTHENTICATED = "unauthenticated"          # Session missing or expired
    INVALID_CREDENTIALS = "invalid_credentials"  # Login rejected
    CONFLICT = "conflict"                        # Email already registered
    NOT_FOUND = "not_found"                      # Contact missing or not owned
    SERVER = "server"                            # 5xx or unexpected response
    NETWORK = "network"                          # Server unreachable or timed out
    BUSY = "busy"                                # Submission already in flight


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed outcome with a single-line, user-readable message."""

    kind: ErrorKind
    message: str
    status: Optional[int] = None
    errors: list[dict[str, str]] = field(default_factory=list)


Result = Union[Ok[T], Failure]


def describe_field_errors(errors: list[dict[str, str]], fallback: str) -> str:
    """Join field errors into one line, e.g. ``email: value is not a valid email address``."""
    if not errors:
        return fallback
    return "; ".join(f"{e.get('field', 'input')}: {e.get('message', 'invalid')}" for e in errors)

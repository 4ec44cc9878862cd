"""API models package."""

from .errors import ErrorResponse, FieldError

__all__ = [
    "ErrorResponse",
    "FieldError",
]

"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Optional


class FieldError(BaseModel):
    """A single invalid field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response format."""

    detail: str
    code: Optional[str] = None
    errors: Optional[list[FieldError]] = None

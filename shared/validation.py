"""
Input schemas shared by the server and the client.

The same models back FastAPI request parsing (authoritative) and the
client's pre-submit checks, so both sides reject exactly the same input.
"""

from typing import Any, Mapping, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6
MIN_PHONE_LENGTH = 10

InputT = TypeVar("InputT", bound=BaseModel)


class LoginInput(BaseModel):
    """Credentials submitted to log in."""

    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class RegisterInput(LoginInput):
    """Credentials plus optional display name submitted to register."""

    name: Optional[str] = Field(None, max_length=200)


class ContactInput(BaseModel):
    """
    Contact fields accepted on create and update.

    Updates are full replacements, so every field is required on both.
    Owner fields in the payload are ignored; the owner always comes from
    the authenticated request.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=MIN_PHONE_LENGTH)


def format_errors(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, str]]:
    """
    Flatten pydantic error entries into ``{"field", "message"}`` pairs.

    The leading ``body`` location added by FastAPI is dropped so server and
    client report the same field names.
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        formatted.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


def _validate(model: type[InputT], data: Any) -> InputT:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(details={"errors": format_errors(e.errors())}) from e


def validate_login(data: Any) -> LoginInput:
    """Validate login input, raising ValidationError on failure."""
    return _validate(LoginInput, data)


def validate_register(data: Any) -> RegisterInput:
    """Validate registration input, raising ValidationError on failure."""
    return _validate(RegisterInput, data)


def validate_contact(data: Any) -> ContactInput:
    """Validate contact input, raising ValidationError on failure."""
    return _validate(ContactInput, data)

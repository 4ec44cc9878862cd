"""
Exception handlers.

Maps the domain error taxonomy onto HTTP statuses and one response
shape. Anything unclassified becomes a logged 500 whose body never
carries internal detail.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.auth.exceptions import InvalidCredentialsError
from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    ContactBookError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from shared.validation import format_errors

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"
INVALID_INPUT_MESSAGE = "Invalid input data"


def _respond(
    status_code: int,
    detail: str,
    code: Optional[str] = None,
    errors: Optional[list[dict]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(detail=detail, code=code, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are 400, not FastAPI's default 422."""
    return _respond(
        status.HTTP_400_BAD_REQUEST,
        INVALID_INPUT_MESSAGE,
        code="VALIDATION_ERROR",
        errors=format_errors(exc.errors()),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _respond(
        status.HTTP_400_BAD_REQUEST,
        exc.message,
        code=exc.code,
        errors=exc.details.get("errors"),
    )


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    headers = None if isinstance(exc, InvalidCredentialsError) else {"WWW-Authenticate": "Bearer"}
    return _respond(status.HTTP_401_UNAUTHORIZED, exc.message, code=exc.code, headers=headers)


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _respond(status.HTTP_400_BAD_REQUEST, exc.message, code=exc.code)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _respond(status.HTTP_404_NOT_FOUND, exc.message, code=exc.code)


async def server_error_handler(request: Request, exc: ContactBookError) -> JSONResponse:
    """ServerError and any unmapped domain error."""
    operation = exc.details.get("operation") if isinstance(exc, ServerError) else exc.code
    logger.error("%s %s failed during %s", request.method, request.url.path, operation)
    return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, code="SERVER_ERROR")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _respond(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, code="SERVER_ERROR")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep HTTPException responses in the standard error shape."""
    return _respond(
        exc.status_code,
        str(exc.detail),
        code=getattr(exc, "code", None),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Attach all error handlers to an application.

    Handlers are resolved by the exception's MRO, so module-specific
    subclasses pick up their base class's status.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(ContactBookError, server_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

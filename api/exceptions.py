"""Exception handlers for the Content Store FastAPI application.

This module converts store errors and unexpected Python exceptions into
consistent JSON responses. Store errors carry a ``condition`` name that is
echoed back so clients can branch without parsing messages.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from models.errors import ConflictError, NotFoundError, StoreError, UnauthorizedError

logger = logging.getLogger(__name__)


def _store_error_response(status_code: int, error: str, exc: StoreError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "detail": exc.reason,
            "condition": exc.condition,
        },
    )


async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    """Handle UnauthorizedError with a 403.

    The caller's identity was accepted; it simply lacks the capability or
    ownership the operation needs.
    """
    return _store_error_response(status.HTTP_403_FORBIDDEN, "Unauthorized", exc)


async def not_found_handler(request: Request, exc: NotFoundError):
    """Handle NotFoundError with a 404."""
    return _store_error_response(status.HTTP_404_NOT_FOUND, "Not Found", exc)


async def conflict_handler(request: Request, exc: ConflictError):
    """Handle ConflictError with a 409.

    Raised for duplicate usernames, repeated likes or follows, and
    unlikes/unfollows that have nothing to undo.
    """
    return _store_error_response(status.HTTP_409_CONFLICT, "Conflict", exc)


async def store_error_handler(request: Request, exc: StoreError):
    """Handle any other StoreError subclass with a 400."""
    return _store_error_response(status.HTTP_400_BAD_REQUEST, "Rejected", exc)


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors raised inside handlers.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(include_url=False, include_context=False),
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    ValueErrors indicate input that passed request validation but was
    rejected by the store (an unknown media type, a negative page).
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "type": "ValueError",
        },
    )


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Handle RuntimeError exceptions."""
    logger.error(f"Runtime error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Runtime Error",
            "detail": str(exc),
            "type": "RuntimeError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the full traceback and returns a generic message so stack traces
    never reach clients.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )

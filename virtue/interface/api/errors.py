"""Exception handlers rendering every error as ``{"message": ...}``."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from virtue.domain.error import (
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    UserNotProvisionedError,
)


def _message(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"message": message}, headers=headers
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render an HTTPException with its detail as the message."""
    return _message(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400s."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    logfire.debug("Request validation failed", path=request.url.path, errors=errors)
    return _message(status.HTTP_400_BAD_REQUEST, str(message))


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render domain errors that escaped a route."""
    if isinstance(exc, NotAuthenticatedError):
        return _message(status.HTTP_401_UNAUTHORIZED, "Unauthorized")
    if isinstance(exc, NotAuthorizedError):
        return _message(status.HTTP_403_FORBIDDEN, "Forbidden")
    if isinstance(exc, NotFoundError):
        return _message(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")
    if isinstance(exc, UserNotProvisionedError):
        return _message(status.HTTP_404_NOT_FOUND, str(exc))
    return _message(status.HTTP_400_BAD_REQUEST, str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected errors without leaking details."""
    logfire.error(
        "Unhandled error", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

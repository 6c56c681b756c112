"""
Error taxonomy and JSON error rendering.

Every error leaves the API as {"error": "<message>"}. Services raise the
AppError subclasses below; the handlers registered here turn them (and
anything unexpected) into terse JSON responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Malformed or missing input."""
    status_code = 400


class ConflictError(AppError):
    """Email already registered under either role."""
    status_code = 400


class AuthError(AppError):
    """Bad credentials."""
    status_code = 400


class NotFoundError(AppError):
    """Missing document. CV endpoints report this as 400."""
    status_code = 404


class ServerError(AppError):
    """Unexpected storage or runtime failure."""
    status_code = 500


class StartupError(Exception):
    """Raised when the process cannot start serving (config or storage)."""


def flatten_validation_errors(errors) -> str:
    """Join pydantic error entries into one '; '-separated message."""
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        msg = err.get("msg", "Invalid value")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(messages)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = flatten_validation_errors(exc.errors())
    logger.info(f"{request.method} {request.url.path} invalid request: {message}")
    return _error_response(400, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Custom exception hierarchy and handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""

    status_code = 400

    def __init__(self, message: str, error: str | None = None) -> None:
        self.message = message
        self.error = error
        super().__init__(message)


class NotFoundException(AppException):
    """Raised when entity is not found."""

    status_code = 404


class ConflictException(AppException):
    """Raised when a uniqueness constraint rejects a write."""

    status_code = 400


class ForbiddenException(AppException):
    """Raised when caller lacks rights for operation."""

    status_code = 403


class UnauthenticatedException(AppException):
    """Raised when request carries no usable credentials."""

    status_code = 401


class ValidationException(AppException):
    """Raised when a document fails schema validation before persistence."""

    status_code = 400


def error_body(message: str, error: str | None = None) -> dict[str, str]:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


async def app_exception_handler(_: Request, exc: AppException) -> JSONResponse:
    """Handle custom domain exceptions."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.error))


async def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTP exceptions in unified shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=exc.headers,
    )


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed payloads as 400 listing each offending field."""
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(part) for part in item.get('loc', ()))}: {item.get('msg')}" for item in errors
    )
    return JSONResponse(status_code=400, content=error_body("Validation error", detail or None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content=error_body("Internal server error"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

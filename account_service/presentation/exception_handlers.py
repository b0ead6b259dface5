"""Exception handlers for converting errors to HTTP responses.

Every error body has the same shape: ``{"detail": ..., "error_code": ...}``,
plus an ``errors`` list for validation failures. The HTTP status comes from
the error_code through ERROR_CODE_TO_HTTP_STATUS.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from account_service.application.results import AuthError
from account_service.application.validators import FieldError, to_field_errors
from account_service.domain.exceptions import DomainException
from account_service.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def error_response(message: str, error_code: str) -> JSONResponse:
    """Build the standard error body for an error code."""
    return JSONResponse(
        status_code=get_http_status_for_error_code(error_code),
        content={
            "detail": message,
            "error_code": error_code,
        },
    )


def auth_error_response(error: AuthError) -> JSONResponse:
    """Convert a failed use case Result into an HTTP response."""
    return error_response(error.message, error.error_code)


def validation_failed_response(errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": [{"field": e.field, "message": e.message} for e in errors],
        },
    )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    Domain exceptions that reach this point are contract violations,
    so server-side ones are logged with a traceback.
    """
    http_status = get_http_status_for_error_code(exc.error_code)
    if http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Domain contract violation: {exc.error_code}", exc_info=exc)

    return error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Returns a list of all validation errors with field locations
    (e.g. "body.email") and messages.
    """
    return validation_failed_response(to_field_errors(exc.errors()))


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors.

    Returns a standardized error response without exposing internal
    database details.
    """
    logger.error(f"Database error: {exc}", exc_info=True)

    return error_response("An internal database error occurred", "DATABASE_ERROR")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for any unexpected errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return error_response("An internal server error occurred", "INTERNAL_SERVER_ERROR")

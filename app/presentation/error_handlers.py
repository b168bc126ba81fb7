"""
Exception handlers translating domain exceptions into HTTP responses.

Every error body has the shape {"error": <code>, "message": <text>, "details": {...}}.

Usage:
    app = FastAPI()
    register_exception_handlers(app)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    AssignmentError,
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    RentalException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.context import get_correlation_id

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

# Checked in order, first match wins (ConcurrentUpdateException is a ConflictException)
_STATUS_BY_EXCEPTION: list[tuple[type[RentalException], int]] = [
    (ValidationException, status.HTTP_400_BAD_REQUEST),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationException, status.HTTP_403_FORBIDDEN),
    (ResourceNotFoundException, status.HTTP_404_NOT_FOUND),
    (ConflictException, status.HTTP_409_CONFLICT),
    (AssignmentError, status.HTTP_409_CONFLICT),
]


def status_code_for(exc: RentalException) -> int:
    """HTTP status for a domain exception, 400 for anything unmapped."""
    for exc_type, code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def rental_exception_handler(request: Request, exc: RentalException) -> JSONResponse:
    code = status_code_for(exc)
    logger.warning(
        "%s %s rejected with %s: %s",
        request.method,
        request.url.path,
        exc.error_code,
        exc.message,
    )
    return JSONResponse(status_code=code, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies and query parameters are reported as 400, not 422."""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.info("%s %s failed validation", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": {"errors": errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    correlation_id = get_correlation_id()
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "details": {"correlation_id": correlation_id},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all domain exception handlers on the application."""
    # Handlers take their concrete exception types; Starlette dispatches by class
    app.add_exception_handler(
        RentalException,
        rental_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        RequestValidationError,
        request_validation_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Map domain exceptions to JSON error responses.

Every error body has the shape ``{"success": false, "error": "..."}``.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gearstore.domain.exceptions import (
    AuthenticationError,
    DomainException,
    EntityNotFoundError,
    NoExpirationSetError,
    NoProductsOnHoldError,
    NotificationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; anything else is a server-side failure.
STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (AuthenticationError, 401),
    (EntityNotFoundError, 404),
    (ValidationError, 400),
    (NoExpirationSetError, 400),
    (NoProductsOnHoldError, 400),
]


def status_for(exc: DomainException) -> int:
    for exc_type, status in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status
    return 500


def error_body(message: str, **extra: object) -> dict:
    return {"success": False, "error": message, **extra}


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status = status_for(exc)
    message = str(exc) or type(exc).__name__
    extra: dict[str, object] = {}

    if isinstance(exc, NotificationError):
        if exc.hold is not None:
            extra["holdId"] = exc.hold.id
        if exc.report is not None:
            extra["notifications"] = [asdict(leg) for leg in exc.report.legs]

    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, message)
    else:
        logger.info("%s %s rejected (%d): %s", request.method, request.url.path, status, message)
    return JSONResponse(status_code=status, content=error_body(message, **extra))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content=error_body(message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

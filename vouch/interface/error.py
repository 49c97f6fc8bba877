"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from vouch.domain.error import (
    AlreadyMemberError,
    AlreadyVerifiedError,
    BusinessRuleViolationError,
    DomainError,
    DuplicateInviteeError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

GENERIC_ERROR_MESSAGE = "Something went wrong, Please try later."

# Checked in order; the first matching class wins
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (DuplicateInviteeError, status.HTTP_409_CONFLICT),
    (AlreadyMemberError, status.HTTP_409_CONFLICT),
    (AlreadyVerifiedError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
]


def status_code_for(error: DomainError) -> int:
    for error_type, code in STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_code_for(exc)
    logfire.info(
        "Domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=code,
        detail=exc.message,
    )
    return JSONResponse(status_code=code, content={"detail": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from wanrun.errors import (
    DomainError,
    DomainValidationError,
    DuplicateResourceError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from wanrun.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

# Message returned for server-kind errors; the real cause is only logged.
SERVER_ERROR_DETAIL = "An internal error occurred. Please retry later."


def _error_response(
    status_code: int, exc: DomainError, detail: str | None = None, headers: dict | None = None
) -> JSONResponse:
    """Return a standardized error response with detail, machine-readable code and error type."""
    body = ErrorResponse(detail=detail or exc.message, code=exc.code, type=exc.error_type)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


def duplicate_resource_error_handler(
    _request: Request, exc: DuplicateResourceError
) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, exc)


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


def forbidden_error_handler(_request: Request, exc: ForbiddenError) -> JSONResponse:
    return _error_response(status.HTTP_403_FORBIDDEN, exc)


def unauthorized_error_handler(_request: Request, exc: UnauthorizedError) -> JSONResponse:
    return _error_response(
        status.HTTP_401_UNAUTHORIZED,
        exc,
        headers={"WWW-Authenticate": "Bearer"},
    )


def server_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.error(
        "Server error [%s] on %s %s: %s",
        exc.error_type,
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc, detail=SERVER_ERROR_DETAIL)


def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Fallback for DomainError subclasses without a dedicated handler."""
    if exc.is_client_error:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc)
    return server_error_handler(request, exc)


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(DuplicateResourceError, duplicate_resource_error_handler)
    app.add_exception_handler(ForbiddenError, forbidden_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(ServerError, server_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)

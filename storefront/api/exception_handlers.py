"""
Exception handlers for FastAPI application.

Domain exceptions are rendered as
{"success": false, "error": <code>, "message": <text>, "details": {...}}.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.domain import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidCredentialsException,
    InvalidStatusException,
    PersistenceException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Most specific first
DOMAIN_STATUS_CODES: tuple[tuple[type[DomainException], int], ...] = (
    (ValidationException, status.HTTP_400_BAD_REQUEST),
    (InsufficientStockException, status.HTTP_400_BAD_REQUEST),
    (InvalidStatusException, status.HTTP_400_BAD_REQUEST),
    (DuplicateEntityException, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundException, status.HTTP_404_NOT_FOUND),
    (ConflictException, status.HTTP_409_CONFLICT),
    (InvalidCredentialsException, status.HTTP_401_UNAUTHORIZED),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationException, status.HTTP_403_FORBIDDEN),
    (PersistenceException, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def _is_order_route(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    prefix = settings.API_PREFIX if settings else "/api"
    return request.url.path.startswith(f"{prefix}/orders")


def status_code_for(exc: DomainException, request: Request) -> int:
    """HTTP status for a domain exception raised while serving request."""
    if isinstance(exc, EntityNotFoundException) and _is_order_route(request):
        # Order routes report unknown references as bad input
        return status.HTTP_400_BAD_REQUEST
    for exc_type, code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle DomainException subclasses with their mapped status code."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = status_code_for(exc, request)
    if isinstance(exc, PersistenceException):
        logger.error(
            f"Persistence failure on {request.method} {request.url.path}: {exc.original_error!r}",
            exc_info=exc.original_error,
        )
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content={
            "success": False,
            "error": "HTTP_ERROR",
            "message": http_exc.detail,
            "details": {},
        },
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    errors = []
    if isinstance(exc, RequestValidationError):
        for error in exc.errors():
            errors.append(
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
            )

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "VALIDATION_ERROR",
            "message": errors[0]["message"] if errors else "Validation error",
            "details": {"errors": errors},
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "INTERNAL_ERROR",
            "message": "Internal server error",
            "details": {},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")

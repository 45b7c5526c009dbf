"""
Typed service errors and their single mapping to HTTP responses.
"""
from typing import Any, Dict, List, Optional, Tuple, Type
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for every error the service maps to a response."""


class ValidationError(CatalogError):
    """Malformed or missing request fields."""

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__("invalid request")
        self.errors = errors or []


class DuplicateEmailError(CatalogError):
    pass


class InvalidCredentialsError(CatalogError):
    """Unknown email or wrong password; the two causes are never told apart."""


class UnauthenticatedError(CatalogError):
    pass


class InvalidTokenError(CatalogError):
    """Malformed, tampered or expired bearer token."""


class NotFoundError(CatalogError):
    pass


class InternalError(CatalogError):
    """Store, hashing or signing failure. The cause is logged, never returned."""


ERROR_RESPONSES: Dict[Type[CatalogError], Tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "Invalid request"),
    DuplicateEmailError: (status.HTTP_400_BAD_REQUEST, "User already exists"),
    InvalidCredentialsError: (status.HTTP_401_UNAUTHORIZED, "Invalid email or password"),
    UnauthenticatedError: (status.HTTP_401_UNAUTHORIZED, "Token missing"),
    InvalidTokenError: (status.HTTP_403_FORBIDDEN, "Invalid or expired token"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Product not found"),
    InternalError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
}


def error_response(exc: CatalogError) -> JSONResponse:
    """Build the response for a service error from ERROR_RESPONSES."""
    status_code, message = ERROR_RESPONSES.get(
        type(exc), ERROR_RESPONSES[InternalError]
    )
    body: Dict[str, Any] = {"message": message}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=body)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(
            "Internal error on %s %s: %s",
            request.method, request.url.path, exc,
            exc_info=exc.__cause__ or exc,
        )
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Report field locations and messages only, not the rejected input
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(ValidationError(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s: %s",
        request.method, request.url.path, exc,
        exc_info=exc,
    )
    return error_response(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

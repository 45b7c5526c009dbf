"""
Bearer-token guard for protected routes.
"""
from fastapi import Header, Request
from typing import Optional
import logging

from .auth import TokenIdentity, TokenService
from .errors import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger(__name__)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def require_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> TokenIdentity:
    """
    Reject the request unless it carries a valid bearer token.

    A missing token is UnauthenticatedError (401); a token that fails
    verification is InvalidTokenError (403). On success the identity is
    stored on request.state.identity and returned.
    """
    parts = (authorization or "").split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.debug("Rejected %s %s: token missing", request.method, request.url.path)
        raise UnauthenticatedError("token missing")

    try:
        identity = get_token_service(request).verify(parts[1])
    except InvalidTokenError:
        logger.debug("Rejected %s %s: invalid token", request.method, request.url.path)
        raise

    request.state.identity = identity
    return identity

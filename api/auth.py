"""Bearer-token authentication guards for the buddy read API."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings
from core.exceptions import UnauthorizedError
from core.log import get_logger
from core.security import TokenClaims, decode_token

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_current_user(
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> TokenClaims | None:
    """Claims of the ``Authorization: Bearer`` token, or None.

    A missing or invalid token yields None; the guards below decide whether
    that is acceptable.
    """
    if credentials is None:
        return None
    try:
        return decode_token(credentials.credentials, settings)
    except UnauthorizedError:
        logger.debug("Ignoring invalid bearer token")
        return None


def ensure_logged_in(
    claims: Annotated[TokenClaims | None, Depends(get_current_user)],
) -> TokenClaims:
    """Any authenticated user may pass."""
    if claims is None:
        raise UnauthorizedError("Authentication required")
    return claims


def ensure_admin(
    claims: Annotated[TokenClaims, Depends(ensure_logged_in)],
) -> TokenClaims:
    """Only admins may pass."""
    if not claims.is_admin:
        logger.warning(f"User {claims.id} attempted an admin-only operation")
        raise UnauthorizedError("Admin rights required")
    return claims


def ensure_correct_user_or_admin(
    user_id: int,
    claims: Annotated[TokenClaims, Depends(ensure_logged_in)],
) -> TokenClaims:
    """Only the user named by the ``user_id`` path parameter, or an admin."""
    if not claims.is_admin and claims.id != user_id:
        logger.warning(f"User {claims.id} attempted to act on user {user_id}")
        raise UnauthorizedError("Not allowed to act on this user")
    return claims

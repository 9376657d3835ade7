"""Password hashing and access tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from pydantic import BaseModel

from core.config import Settings
from core.exceptions import UnauthorizedError
from core.log import get_logger
from core.models.rows import User

logger = get_logger(__name__)


class TokenClaims(BaseModel):
    """Identity carried by an access token."""

    id: int
    is_admin: bool = False


class PasswordService:
    """One-way password hashing backed by argon2."""

    def __init__(self, time_cost: int = 3) -> None:
        self._hasher = PasswordHasher(time_cost=time_cost)

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, hashed_password: str, password: str) -> bool:
        """Check a plaintext password against a stored hash."""
        try:
            return self._hasher.verify(hashed_password, password)
        except VerifyMismatchError:
            return False
        except InvalidHashError:
            logger.warning("Stored password hash is not a valid argon2 hash")
            return False
        except VerificationError as exc:
            logger.error(f"argon2 verification error: {exc}")
            raise


def create_token(claims: TokenClaims, settings: Settings) -> str:
    """Sign an access token for the given identity."""
    payload: dict[str, Any] = {
        "id": claims.id,
        "isAdmin": claims.is_admin,
        "exp": datetime.now(timezone.utc)
        + timedelta(minutes=settings.token_expire_minutes),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.token_algorithm)


def create_user_token(user: User, settings: Settings) -> str:
    """Sign an access token for a stored user."""
    if user.id is None:
        raise ValueError("Cannot sign a token for an unsaved user")
    return create_token(TokenClaims(id=user.id, is_admin=user.is_admin), settings)


def decode_token(token: str, settings: Settings) -> TokenClaims:
    """Validate a token and return its claims.

    Raises:
        UnauthorizedError: If the token is expired, forged or malformed
    """
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.token_algorithm]
        )
    except jwt.PyJWTError as exc:
        raise UnauthorizedError("Invalid token") from exc

    if "id" not in payload:
        raise UnauthorizedError("Invalid token")
    return TokenClaims(id=payload["id"], is_admin=bool(payload.get("isAdmin")))

"""User repository using SQLModel with dependency injection."""

from collections.abc import Mapping
from typing import Any

from sqlmodel import Session, select

from core.database.repository.base import BaseRepository
from core.database.sql import FilterKey
from core.exceptions import InvalidArgumentError, UnauthorizedError
from core.log import get_logger
from core.models.rows import User
from core.security import PasswordService

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """User repository using SQLModel with dependency injection.

    WARNING: ``update`` can set a new password or grant admin rights. Callers
    must have authorized the change before calling it.
    """

    resource = "user"
    column_map = {
        "firstName": "first_name",
        "lastName": "last_name",
        "profilePicture": "profile_picture",
        "isAdmin": "is_admin",
    }
    updatable = frozenset(
        {"firstName", "lastName", "password", "profilePicture", "isAdmin"}
    )
    filter_keys = (FilterKey("email", "email"),)

    def __init__(self, db: Session, passwords: PasswordService | None = None) -> None:
        """Initialize user repository."""
        super().__init__(User, db)
        self.passwords = passwords or PasswordService()

    def get_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        result = self.db.exec(statement)
        return result.first()

    def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Raises:
            UnauthorizedError: If the user does not exist or the password is wrong
        """
        user = self.get_by_email(email)
        if user and self.passwords.verify(user.password, password):
            return user

        logger.info(f"Failed login attempt for {email}")
        raise UnauthorizedError("Invalid email/password")

    def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        profile_picture: str | None = None,
        is_admin: bool = False,
    ) -> User:
        """Create a user with a hashed password.

        Raises:
            InvalidArgumentError: If the email is already registered
        """
        if self.get_by_email(email):
            raise InvalidArgumentError(f"Duplicate email: {email}")

        user = User(
            email=email,
            password=self.passwords.hash(password),
            first_name=first_name,
            last_name=last_name,
            profile_picture=profile_picture,
            is_admin=is_admin,
        )
        return self.create(user)

    def get(self, user_id: int) -> User:
        return self.get_or_raise(user_id)

    def find_all(self, criteria: Mapping[str, Any] | None = None) -> list[User]:
        """List users, optionally filtered by email."""
        return self.find_by(criteria)

    def update(self, user_id: int, data: Mapping[str, Any]) -> User:
        """Partially update a user; a new password is hashed before storage.

        Raises:
            InvalidArgumentError: If ``data`` is empty or has restricted fields
            NotFoundError: If the user does not exist
        """
        changes = dict(data)
        if changes.get("password"):
            changes["password"] = self.passwords.hash(changes["password"])
        return self.update_or_raise((user_id,), changes)

    def remove(self, user_id: int) -> None:
        self.delete_or_raise(user_id)

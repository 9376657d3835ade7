"""Buddy read and buddy read stat repositories."""

from collections.abc import Mapping
from typing import Any

from sqlmodel import Session

from core.database.repository.base import BaseRepository
from core.database.sql import FilterKey, to_number
from core.models.rows import BuddyRead, BuddyReadStat


class BuddyReadRepository(BaseRepository[BuddyRead]):
    """Buddy read repository using SQLModel with dependency injection."""

    resource = "buddyread"
    column_map = {"bookId": "book_id", "createdBy": "created_by"}
    updatable = frozenset({"status"})
    filter_keys = (
        FilterKey("buddy", "buddy", to_number),
        FilterKey("createdBy", "created_by", to_number),
    )

    def __init__(self, db: Session) -> None:
        """Initialize buddy read repository."""
        super().__init__(BuddyRead, db)

    def create_buddy_read(
        self, book_id: str, created_by: int, buddy: int, status: str
    ) -> BuddyRead:
        return self.create(
            BuddyRead(book_id=book_id, created_by=created_by, buddy=buddy, status=status)
        )

    def get(self, buddyread_id: int) -> BuddyRead:
        return self.get_or_raise(buddyread_id)

    def find_all(self, criteria: Mapping[str, Any] | None = None) -> list[BuddyRead]:
        """List buddy reads, optionally filtered by buddy and/or creator."""
        return self.find_by(criteria)

    def update(self, buddyread_id: int, data: Mapping[str, Any]) -> BuddyRead:
        """Change the status of a buddy read.

        Raises:
            InvalidArgumentError: If ``data`` is empty or has other fields
            NotFoundError: If the buddy read does not exist
        """
        return self.update_or_raise((buddyread_id,), data)

    def remove(self, buddyread_id: int) -> None:
        self.delete_or_raise(buddyread_id)


class BuddyReadStatRepository(BaseRepository[BuddyReadStat]):
    """Per-user progress within a buddy read, keyed by (buddyread, user)."""

    resource = "buddyreadstat"
    key_columns = ("buddyread_id", "user_id")
    column_map = {"buddyreadId": "buddyread_id", "userId": "user_id"}
    updatable = frozenset({"progress", "rating"})
    filter_keys = (
        FilterKey("buddyreadId", "buddyread_id", to_number),
        FilterKey("userId", "user_id", to_number),
    )

    def __init__(self, db: Session) -> None:
        """Initialize buddy read stat repository."""
        super().__init__(BuddyReadStat, db)

    def create_stat(
        self,
        buddyread_id: int,
        user_id: int,
        progress: int = 0,
        rating: int | None = None,
    ) -> BuddyReadStat:
        return self.create(
            BuddyReadStat(
                buddyread_id=buddyread_id,
                user_id=user_id,
                progress=progress,
                rating=rating,
            )
        )

    def get(self, buddyread_id: int, user_id: int) -> BuddyReadStat:
        return self.get_or_raise(buddyread_id, user_id)

    def find_all(
        self, criteria: Mapping[str, Any] | None = None
    ) -> list[BuddyReadStat]:
        return self.find_by(criteria)

    def update(
        self, buddyread_id: int, user_id: int, data: Mapping[str, Any]
    ) -> BuddyReadStat:
        """Update progress and/or rating.

        The key predicates take the two placeholders after the SET values.
        """
        return self.update_or_raise((buddyread_id, user_id), data)

    def remove(self, buddyread_id: int, user_id: int) -> None:
        self.delete_or_raise(buddyread_id, user_id)

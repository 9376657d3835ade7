"""Post repository using SQLModel with dependency injection."""

from collections.abc import Mapping
from typing import Any

from sqlmodel import Session

from core.database.repository.base import BaseRepository
from core.database.sql import FilterKey, to_number
from core.models.rows import Post


class PostRepository(BaseRepository[Post]):
    """Post repository using SQLModel with dependency injection."""

    resource = "post"
    updatable = frozenset({"page", "message", "viewed", "liked"})
    filter_keys = (
        FilterKey("buddyreadId", "buddyread_id", to_number),
        FilterKey("userId", "user_id", to_number),
    )

    def __init__(self, db: Session) -> None:
        """Initialize post repository."""
        super().__init__(Post, db)

    def create_post(
        self,
        buddyread_id: int,
        user_id: int,
        page: int,
        message: str,
        viewed: bool = False,
        liked: bool = False,
    ) -> Post:
        return self.create(
            Post(
                buddyread_id=buddyread_id,
                user_id=user_id,
                page=page,
                message=message,
                viewed=viewed,
                liked=liked,
            )
        )

    def get(self, post_id: int) -> Post:
        return self.get_or_raise(post_id)

    def find_all(self, criteria: Mapping[str, Any] | None = None) -> list[Post]:
        """List posts, optionally filtered by buddy read and/or author."""
        return self.find_by(criteria)

    def update(self, post_id: int, data: Mapping[str, Any]) -> Post:
        return self.update_or_raise((post_id,), data)

    def remove(self, post_id: int) -> None:
        self.delete_or_raise(post_id)

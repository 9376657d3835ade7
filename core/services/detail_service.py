"""Service composing resources with their related rows."""

from sqlmodel import Session

from core.database.repository import (
    BuddyReadRepository,
    BuddyReadStatRepository,
    PostRepository,
    UserRepository,
)
from core.models import (
    BuddyReadDetailResponse,
    BuddyReadResponse,
    BuddyReadStatResponse,
    PostDetailResponse,
    PostResponse,
    UserDetailResponse,
    UserSummary,
)
from core.models.rows import User


class DetailService:
    """Builds the expanded views returned by the single-resource endpoints."""

    def _user_summary(self, session: Session, user_id: int) -> UserSummary | None:
        user: User | None = UserRepository(session).get_by_id(user_id)
        return UserSummary.model_validate(user) if user else None

    def get_user_detail(self, session: Session, user_id: int) -> UserDetailResponse:
        """User with the buddy reads they started, their stats and their posts.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = UserRepository(session).get(user_id)
        buddyreads = BuddyReadRepository(session).find_all({"createdBy": user_id})
        stats = BuddyReadStatRepository(session).find_all({"userId": user_id})
        posts = PostRepository(session).find_all({"userId": user_id})

        detail = UserDetailResponse.model_validate(user)
        detail.buddyreads = [BuddyReadResponse.model_validate(b) for b in buddyreads]
        detail.buddyreadstats = [BuddyReadStatResponse.model_validate(s) for s in stats]
        detail.posts = [PostResponse.model_validate(p) for p in posts]
        return detail

    def get_buddy_read_detail(
        self, session: Session, buddyread_id: int
    ) -> BuddyReadDetailResponse:
        """Buddy read with creator and buddy expanded.

        Raises:
            NotFoundError: If the buddy read does not exist
        """
        buddyread = BuddyReadRepository(session).get(buddyread_id)
        return BuddyReadDetailResponse(
            id=buddyread_id,
            book_id=buddyread.book_id,
            created_by=self._user_summary(session, buddyread.created_by),
            buddy=self._user_summary(session, buddyread.buddy),
            status=buddyread.status,
        )

    def get_post_detail(self, session: Session, post_id: int) -> PostDetailResponse:
        """Post with author and buddy read expanded.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = PostRepository(session).get(post_id)
        buddyread = BuddyReadRepository(session).get_by_id(post.buddyread_id)

        detail = PostDetailResponse.model_validate(post)
        detail.user = self._user_summary(session, post.user_id)
        if buddyread:
            detail.buddyread = BuddyReadResponse.model_validate(buddyread)
        return detail

"""SQLModel table models for the buddy read store."""

from sqlmodel import Field, Index, SQLModel

from core.types import BuddyReadStatus


class User(SQLModel, table=True):
    """Registered reader."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, description="Login email")
    password: str = Field(description="argon2 password hash")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    profile_picture: str | None = Field(default=None, description="Avatar URL")
    is_admin: bool = Field(default=False)


class BuddyRead(SQLModel, table=True):
    """Two users reading the same book together."""

    __tablename__ = "buddyreads"

    id: int | None = Field(default=None, primary_key=True)
    book_id: str = Field(description="External book identifier")
    created_by: int = Field(foreign_key="users.id", ondelete="CASCADE")
    buddy: int = Field(foreign_key="users.id", ondelete="CASCADE")
    status: str = Field(default=BuddyReadStatus.PENDING.value, max_length=25)

    __table_args__ = (
        Index("idx_buddyread_created_by", "created_by"),
        Index("idx_buddyread_buddy", "buddy"),
    )


class BuddyReadStat(SQLModel, table=True):
    """Reading progress of one user within a buddy read."""

    __tablename__ = "buddyreadstats"

    buddyread_id: int = Field(
        foreign_key="buddyreads.id", primary_key=True, ondelete="CASCADE"
    )
    user_id: int = Field(
        foreign_key="users.id", primary_key=True, ondelete="CASCADE"
    )
    progress: int = Field(default=0, ge=0, description="Current page")
    rating: int | None = Field(default=None, ge=1, le=5)


class Post(SQLModel, table=True):
    """Comment left by a user at a given page of a buddy read."""

    __tablename__ = "posts"

    id: int | None = Field(default=None, primary_key=True)
    buddyread_id: int = Field(foreign_key="buddyreads.id", ondelete="CASCADE")
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE")
    page: int = Field(ge=0)
    message: str
    viewed: bool = Field(default=False)
    liked: bool = Field(default=False)

    __table_args__ = (Index("idx_post_buddyread_id", "buddyread_id"),)

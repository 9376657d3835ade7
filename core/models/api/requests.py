"""API request models.

Payload keys are camelCase; ``changes()`` on the update models returns the
submitted fields keyed by those logical names, ready for a partial update.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from core.types import BuddyReadStatus

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CamelRequest(BaseModel):
    """Base for request bodies using camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
    )


class PartialUpdateRequest(CamelRequest):
    """Base for PATCH bodies: every field optional, only submitted ones apply."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self) -> "PartialUpdateRequest":
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.NULLABLE_FIELDS:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Submitted fields keyed by their camelCase names, in declaration order."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class TokenRequest(CamelRequest):
    """Credentials exchanged for an access token."""

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=60)
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelRequest):
    """Self sign-up payload."""

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=60)
    password: str = Field(..., min_length=5, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    profile_picture: str | None = Field(default=None, max_length=250)


class UserCreateRequest(RegisterRequest):
    """Admin-only user creation payload."""

    is_admin: bool = Field(default=False)


class UserUpdateRequest(PartialUpdateRequest):
    """Fields a user (or an admin) may change on a profile."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"profile_picture"})

    first_name: str | None = Field(default=None, min_length=1, max_length=30)
    last_name: str | None = Field(default=None, min_length=1, max_length=30)
    password: str | None = Field(default=None, min_length=5, max_length=50)
    profile_picture: str | None = Field(default=None, max_length=250)
    is_admin: bool | None = Field(default=None)


class BuddyReadCreateRequest(CamelRequest):
    """Invitation to read a book together."""

    book_id: str = Field(..., min_length=1, max_length=100)
    created_by: int = Field(..., ge=1)
    buddy: int = Field(..., ge=1)
    status: BuddyReadStatus = Field(default=BuddyReadStatus.PENDING.value)


class BuddyReadUpdateRequest(PartialUpdateRequest):
    """Buddy read status change."""

    status: BuddyReadStatus | None = Field(default=None)


class BuddyReadStatCreateRequest(CamelRequest):
    """Start tracking a user's progress in a buddy read."""

    buddyread_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)
    progress: int = Field(default=0, ge=0)
    rating: int | None = Field(default=None, ge=1, le=5)


class BuddyReadStatUpdateRequest(PartialUpdateRequest):
    """Progress or rating change."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"rating"})

    progress: int | None = Field(default=None, ge=0)
    rating: int | None = Field(default=None, ge=1, le=5)


class PostCreateRequest(CamelRequest):
    """Comment on a page of a buddy read."""

    buddyread_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)
    page: int = Field(..., ge=0)
    message: str = Field(..., min_length=1, max_length=2000)
    viewed: bool = Field(default=False)
    liked: bool = Field(default=False)


class PostUpdateRequest(PartialUpdateRequest):
    """Editable post fields."""

    page: int | None = Field(default=None, ge=0)
    message: str | None = Field(default=None, min_length=1, max_length=2000)
    viewed: bool | None = Field(default=None)
    liked: bool | None = Field(default=None)

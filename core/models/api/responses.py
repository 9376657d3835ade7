"""API response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelResponse(BaseModel):
    """Base for response bodies serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserResponse(CamelResponse):
    """Public user fields (never includes the password hash)."""

    id: int
    email: str
    first_name: str
    last_name: str
    profile_picture: str | None = None
    is_admin: bool = False


class UserSummary(CamelResponse):
    """User fields embedded in other resources."""

    id: int
    email: str
    first_name: str
    last_name: str
    profile_picture: str | None = None


class BuddyReadResponse(CamelResponse):
    """Buddy read as stored."""

    id: int
    book_id: str
    created_by: int
    buddy: int
    status: str


class BuddyReadDetailResponse(CamelResponse):
    """Buddy read with both participants expanded."""

    id: int
    book_id: str
    created_by: UserSummary | None
    buddy: UserSummary | None
    status: str


class BuddyReadStatResponse(CamelResponse):
    """Reading progress of one user in a buddy read."""

    buddyread_id: int
    user_id: int
    progress: int
    rating: int | None = None


class PostResponse(CamelResponse):
    """Post as stored."""

    id: int
    buddyread_id: int
    user_id: int
    page: int
    message: str
    viewed: bool
    liked: bool


class PostDetailResponse(PostResponse):
    """Post with its author and buddy read expanded."""

    user: UserSummary | None = None
    buddyread: BuddyReadResponse | None = None


class UserDetailResponse(UserResponse):
    """User with the buddy reads they started, their stats and posts."""

    buddyreads: list[BuddyReadResponse] = Field(default_factory=list)
    buddyreadstats: list[BuddyReadStatResponse] = Field(default_factory=list)
    posts: list[PostResponse] = Field(default_factory=list)


class TokenResponse(BaseModel):
    """Signed access token."""

    token: str


class UserEnvelope(BaseModel):
    user: UserResponse


class UserTokenEnvelope(BaseModel):
    user: UserResponse
    token: str


class UserDetailEnvelope(BaseModel):
    user: UserDetailResponse


class UserListEnvelope(BaseModel):
    users: list[UserResponse]


class BuddyReadEnvelope(BaseModel):
    buddyread: BuddyReadResponse


class BuddyReadDetailEnvelope(BaseModel):
    buddyread: BuddyReadDetailResponse


class BuddyReadListEnvelope(BaseModel):
    buddyreads: list[BuddyReadResponse]


class BuddyReadStatEnvelope(BaseModel):
    buddyreadstat: BuddyReadStatResponse


class BuddyReadStatListEnvelope(BaseModel):
    buddyreadstats: list[BuddyReadStatResponse]


class PostEnvelope(BaseModel):
    post: PostResponse


class PostDetailEnvelope(BaseModel):
    post: PostDetailResponse


class PostListEnvelope(BaseModel):
    posts: list[PostResponse]


class DeletedResponse(BaseModel):
    """Identifier of a removed resource."""

    deleted: str


class ErrorResponse(BaseModel):
    """Error body returned for every handled failure."""

    detail: str | list[str]

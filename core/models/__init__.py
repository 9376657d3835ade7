"""Models package for the buddy read API."""

from core.models.api.requests import (
    BuddyReadCreateRequest,
    BuddyReadStatCreateRequest,
    BuddyReadStatUpdateRequest,
    BuddyReadUpdateRequest,
    PostCreateRequest,
    PostUpdateRequest,
    RegisterRequest,
    TokenRequest,
    UserCreateRequest,
    UserUpdateRequest,
)
from core.models.api.responses import (
    BuddyReadDetailEnvelope,
    BuddyReadDetailResponse,
    BuddyReadEnvelope,
    BuddyReadListEnvelope,
    BuddyReadResponse,
    BuddyReadStatEnvelope,
    BuddyReadStatListEnvelope,
    BuddyReadStatResponse,
    DeletedResponse,
    ErrorResponse,
    PostDetailEnvelope,
    PostDetailResponse,
    PostEnvelope,
    PostListEnvelope,
    PostResponse,
    TokenResponse,
    UserDetailEnvelope,
    UserDetailResponse,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
    UserSummary,
    UserTokenEnvelope,
)
from core.models.rows import BuddyRead, BuddyReadStat, Post, User

__all__ = [
    # Rows
    "BuddyRead",
    "BuddyReadStat",
    "Post",
    "User",
    # Requests
    "BuddyReadCreateRequest",
    "BuddyReadStatCreateRequest",
    "BuddyReadStatUpdateRequest",
    "BuddyReadUpdateRequest",
    "PostCreateRequest",
    "PostUpdateRequest",
    "RegisterRequest",
    "TokenRequest",
    "UserCreateRequest",
    "UserUpdateRequest",
    # Responses
    "BuddyReadDetailEnvelope",
    "BuddyReadDetailResponse",
    "BuddyReadEnvelope",
    "BuddyReadListEnvelope",
    "BuddyReadResponse",
    "BuddyReadStatEnvelope",
    "BuddyReadStatListEnvelope",
    "BuddyReadStatResponse",
    "DeletedResponse",
    "ErrorResponse",
    "PostDetailEnvelope",
    "PostDetailResponse",
    "PostEnvelope",
    "PostListEnvelope",
    "PostResponse",
    "TokenResponse",
    "UserDetailEnvelope",
    "UserDetailResponse",
    "UserEnvelope",
    "UserListEnvelope",
    "UserResponse",
    "UserSummary",
    "UserTokenEnvelope",
]

"""Repository layer for database operations."""

from .base import BaseRepository
from .buddyread import BuddyReadRepository, BuddyReadStatRepository
from .post import PostRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "BuddyReadRepository",
    "BuddyReadStatRepository",
    "PostRepository",
    "UserRepository",
]

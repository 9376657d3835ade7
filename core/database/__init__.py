"""Core database functionality."""

from .engine import (
    create_database_engine,
    create_database_tables,
    drop_database_tables,
    enable_foreign_keys,
    reset_database,
)
from .repository import (
    BuddyReadRepository,
    BuddyReadStatRepository,
    PostRepository,
    UserRepository,
)
from .sql import ClauseResult, FilterKey, build_filter_clause, build_update_clause

__all__ = [
    "BuddyReadRepository",
    "BuddyReadStatRepository",
    "PostRepository",
    "UserRepository",
    "ClauseResult",
    "FilterKey",
    "build_filter_clause",
    "build_update_clause",
    "create_database_engine",
    "create_database_tables",
    "drop_database_tables",
    "enable_foreign_keys",
    "reset_database",
]

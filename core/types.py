"""Common type definitions for the buddy read system."""

from enum import Enum
from typing import Any, TypeAlias

RepositoryRowType: TypeAlias = dict[str, Any]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class BuddyReadStatus(str, Enum):
    """Buddy read invitation status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"

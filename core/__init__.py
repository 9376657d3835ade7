"""Core functionality for the buddy read API."""

from .config import Settings, load_settings
from .exceptions import (
    BuddyReadError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_production_logging,
    setup_test_logging,
)
from .types import BuddyReadStatus, Environment

__all__ = [
    "BuddyReadError",
    "BuddyReadStatus",
    "Environment",
    "InvalidArgumentError",
    "NotFoundError",
    "Settings",
    "UnauthorizedError",
    "get_logger",
    "load_settings",
    "setup_logging",
    "setup_production_logging",
    "setup_test_logging",
]

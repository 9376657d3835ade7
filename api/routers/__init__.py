"""API routers package."""

from .auth import router as auth_router
from .buddyreads import router as buddyreads_router
from .buddyreadstats import router as buddyreadstats_router
from .common import router as common_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "buddyreads_router",
    "buddyreadstats_router",
    "common_router",
    "posts_router",
    "users_router",
]

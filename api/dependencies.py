"""FastAPI dependencies for SQLModel integration."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.engine import Engine
from sqlmodel import Session

from core.database.repository import (
    BuddyReadRepository,
    BuddyReadStatRepository,
    PostRepository,
    UserRepository,
)
from core.security import PasswordService
from core.services import DetailService


# Database engine dependency
def get_engine(request: Request) -> Engine:
    """Get database engine from app state."""
    engine: Engine = request.app.state.engine
    return engine


# Database session dependency
def get_db(
    engine: Annotated[Engine, Depends(get_engine)],
) -> Generator[Session, None, None]:
    """Open one session per request."""
    with Session(engine) as session:
        yield session


def get_password_service(request: Request) -> PasswordService:
    """Get the password hasher from app state."""
    passwords: PasswordService = request.app.state.passwords
    return passwords


# Repository dependencies
def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
    passwords: Annotated[PasswordService, Depends(get_password_service)],
) -> UserRepository:
    """Get user repository."""
    return UserRepository(db, passwords)


def get_buddy_read_repository(
    db: Annotated[Session, Depends(get_db)],
) -> BuddyReadRepository:
    """Get buddy read repository."""
    return BuddyReadRepository(db)


def get_buddy_read_stat_repository(
    db: Annotated[Session, Depends(get_db)],
) -> BuddyReadStatRepository:
    """Get buddy read stat repository."""
    return BuddyReadStatRepository(db)


def get_post_repository(db: Annotated[Session, Depends(get_db)]) -> PostRepository:
    """Get post repository."""
    return PostRepository(db)


def get_detail_service() -> DetailService:
    return DetailService()

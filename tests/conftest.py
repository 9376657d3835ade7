"""Global pytest configuration and fixtures."""

from collections.abc import Generator
from logging import Logger
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlmodel import Session

from core import setup_test_logging
from core.database.engine import create_database_tables, enable_foreign_keys
from core.database.repository import (
    BuddyReadRepository,
    BuddyReadStatRepository,
    PostRepository,
    UserRepository,
)
from core.models.rows import BuddyRead, BuddyReadStat, Post, User
from core.security import PasswordService

from tests.utils.test_helpers import ApiContext, TestDataFactory


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from core import get_logger

    return get_logger("test")


@pytest.fixture(scope="session")
def passwords() -> PasswordService:
    """Fast password hasher for tests."""
    return PasswordService(time_cost=1)


@pytest.fixture
def mock_db_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """Create a real database engine for testing using a file-based database."""
    db_path = tmp_path / "test.db"
    database_url = f"sqlite:///{db_path}"

    engine = create_engine(
        database_url,
        echo=False,
        connect_args={
            "check_same_thread": False,
            "timeout": 60.0,
        },
    )
    enable_foreign_keys(engine)
    create_database_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def mock_db_session(mock_db_engine: Engine) -> Generator[Session, None, None]:
    with Session(mock_db_engine) as session:
        yield session


@pytest.fixture
def user_repo(mock_db_session: Session, passwords: PasswordService) -> UserRepository:
    """Create user repository instance."""
    return UserRepository(mock_db_session, passwords)


@pytest.fixture
def buddy_read_repo(mock_db_session: Session) -> BuddyReadRepository:
    """Create buddy read repository instance."""
    return BuddyReadRepository(mock_db_session)


@pytest.fixture
def buddy_read_stat_repo(mock_db_session: Session) -> BuddyReadStatRepository:
    """Create buddy read stat repository instance."""
    return BuddyReadStatRepository(mock_db_session)


@pytest.fixture
def post_repo(mock_db_session: Session) -> PostRepository:
    """Create post repository instance."""
    return PostRepository(mock_db_session)


@pytest.fixture
def saved_users(user_repo: UserRepository) -> list[User]:
    """Three users; only the second one is an admin."""
    return [
        user_repo.register(**TestDataFactory.user_data(1)),
        user_repo.register(**TestDataFactory.user_data(2), is_admin=True),
        user_repo.register(**TestDataFactory.user_data(3)),
    ]


@pytest.fixture
def saved_buddy_reads(
    buddy_read_repo: BuddyReadRepository, saved_users: list[User]
) -> list[BuddyRead]:
    """u1 reads with u2, u2 reads with u3, u1 reads with u3."""
    u1, u2, u3 = (user.id for user in saved_users)
    assert u1 is not None and u2 is not None and u3 is not None
    return [
        buddy_read_repo.create_buddy_read("book-1", u1, u2, "pending"),
        buddy_read_repo.create_buddy_read("book-2", u2, u3, "accepted"),
        buddy_read_repo.create_buddy_read("book-3", u1, u3, "completed"),
    ]


@pytest.fixture
def saved_stats(
    buddy_read_stat_repo: BuddyReadStatRepository,
    saved_buddy_reads: list[BuddyRead],
) -> list[BuddyReadStat]:
    """One stat row per participant of every buddy read."""
    stats = []
    for buddyread in saved_buddy_reads:
        assert buddyread.id is not None
        stats.append(
            buddy_read_stat_repo.create_stat(buddyread.id, buddyread.created_by)
        )
        stats.append(
            buddy_read_stat_repo.create_stat(buddyread.id, buddyread.buddy, 10)
        )
    return stats


@pytest.fixture
def saved_posts(
    post_repo: PostRepository, saved_buddy_reads: list[BuddyRead]
) -> list[Post]:
    """Two posts on the first buddy read, one on the second."""
    first, second, _ = saved_buddy_reads
    assert first.id is not None and second.id is not None
    return [
        post_repo.create_post(first.id, first.created_by, 12, "Great opening"),
        post_repo.create_post(first.id, first.buddy, 30, "Agreed"),
        post_repo.create_post(second.id, second.buddy, 5, "Slow start"),
    ]


@pytest.fixture
def client(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """TestClient over a fresh app backed by a file database in tmp_path."""
    monkeypatch.setenv("BUDDYREAD_ENV", "testing")
    monkeypatch.setenv("BUDDYREAD_DATABASE_PATH", str(tmp_path / "api.db"))

    from api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def api(client: TestClient) -> ApiContext:
    """Seeded users, buddy reads, stats and posts plus tokens for the client."""
    return ApiContext.seed(client)

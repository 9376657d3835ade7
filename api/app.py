"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import (
    auth_router,
    buddyreads_router,
    buddyreadstats_router,
    common_router,
    posts_router,
    users_router,
)
from api.utils.error_handler import register_exception_handlers
from core import get_logger, setup_logging, setup_production_logging
from core.config import load_settings
from core.database.engine import create_database_engine, create_database_tables
from core.security import PasswordService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = load_settings()
    app.state.settings = settings
    if settings.is_production:
        setup_production_logging(level=settings.log_level)
    elif not settings.is_testing:
        setup_logging(
            level=settings.log_level,
            enable_file_logging=settings.log_to_file,
        )
    logger.info(f"Starting Buddy Read API server in {settings.environment} mode")

    db_path = Path(settings.database_path) if settings.database_path else None
    engine = create_database_engine(settings.environment, db_path=db_path)
    create_database_tables(engine)
    app.state.engine = engine
    app.state.passwords = PasswordService(time_cost=settings.password_time_cost)

    logger.info("Buddy Read API server initialized successfully")

    yield

    engine.dispose()
    logger.info("Buddy Read API server shutting down")


def create_app() -> FastAPI:
    """Create FastAPI app with current settings."""
    settings = load_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Backend API for reading books together",
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(common_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(buddyreads_router)
    app.include_router(buddyreadstats_router)
    app.include_router(posts_router)
    return app


app = create_app()

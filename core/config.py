"""Configuration management for the buddy read API."""

import os
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import Environment

# argon2 lower bound, keeps hashing fast in test runs
MIN_PASSWORD_TIME_COST = 1

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Application settings."""

    # Environment
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # API Settings
    api_title: str = Field(default="Buddy Read API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # Logging
    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=False, description="Write logs to ./logs")

    # Database
    database_path: str | None = Field(
        default=None, description="SQLite database file (None for the default path)"
    )

    # Auth Settings
    secret_key: str = Field(
        default="secret-dev", description="Key used to sign access tokens"
    )
    token_algorithm: str = Field(default="HS256", description="JWT algorithm")
    token_expire_minutes: int = Field(
        default=60 * 24, ge=1, description="Access token lifetime in minutes"
    )
    password_time_cost: int = Field(
        default=3, ge=MIN_PASSWORD_TIME_COST, description="argon2 time cost"
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if self.environment == Environment.TESTING:
            self.password_time_cost = MIN_PASSWORD_TIME_COST

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ["true", "1", "yes", "on"]


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    cors_origins_str = os.getenv("BUDDYREAD_CORS_ORIGINS", "*")
    if cors_origins_str == "*":
        cors_origins = ["*"]
    else:
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

    return Settings(
        environment=Environment(os.getenv("BUDDYREAD_ENV", "development")),
        api_title=os.getenv("BUDDYREAD_API_TITLE", "Buddy Read API"),
        api_version=os.getenv("BUDDYREAD_API_VERSION", "1.0.0"),
        cors_allow_origins=cors_origins,
        log_level=os.getenv("BUDDYREAD_LOG_LEVEL", "INFO").upper(),
        log_to_file=_parse_bool(os.getenv("BUDDYREAD_LOG_TO_FILE", "false")),
        database_path=os.getenv("BUDDYREAD_DATABASE_PATH"),
        secret_key=os.getenv("BUDDYREAD_SECRET_KEY", "secret-dev"),
        token_expire_minutes=int(
            os.getenv("BUDDYREAD_TOKEN_EXPIRE_MINUTES", str(60 * 24))
        ),
        password_time_cost=int(os.getenv("BUDDYREAD_PASSWORD_TIME_COST", "3")),
    )

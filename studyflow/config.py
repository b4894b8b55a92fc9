"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Durable storage
    DATABASE_URL: str = "sqlite:///studyflow.db"
    STORAGE_KEY_PREFIX: str = "studyflow_"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Subjects
    DEFAULT_TARGET_HOURS: float = 40.0

    # Analytics
    WEEKLY_WINDOW_DAYS: int = 7
    RECENT_SESSIONS_LIMIT: int = 10
    UPCOMING_DEADLINES_LIMIT: int = 5

    @computed_field  # type: ignore[prop-decorator]
    @property
    def subjects_key(self) -> str:
        """Storage key of the subjects collection."""
        return f"{self.STORAGE_KEY_PREFIX}subjects"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def assignments_key(self) -> str:
        """Storage key of the assignments collection."""
        return f"{self.STORAGE_KEY_PREFIX}assignments"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def sessions_key(self) -> str:
        """Storage key of the study sessions collection."""
        return f"{self.STORAGE_KEY_PREFIX}sessions"

    @field_validator("STORAGE_KEY_PREFIX", mode="after")
    @classmethod
    def strip_storage_key_prefix(cls, value: str) -> str:
        """Strip whitespace from the storage key prefix and reject an empty one."""
        value = value.strip()
        if not value:
            msg = "STORAGE_KEY_PREFIX cannot be empty"
            raise ValueError(msg)
        return value

    @field_validator("DEFAULT_TARGET_HOURS", mode="after")
    @classmethod
    def check_default_target_hours(cls, value: float) -> float:
        if value <= 0:
            msg = "DEFAULT_TARGET_HOURS must be positive"
            raise ValueError(msg)
        return value

    @field_validator(
        "WEEKLY_WINDOW_DAYS", "RECENT_SESSIONS_LIMIT", "UPCOMING_DEADLINES_LIMIT", mode="after"
    )
    @classmethod
    def check_positive_int(cls, value: int) -> int:
        if value < 1:
            msg = "Analytics windows and limits must be at least 1"
            raise ValueError(msg)
        return value


LOG_LEVELS: dict[str, int] = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


def configure_logging(environment: str = "development") -> None:
    """
    Configure structlog on top of stdlib logging.

    Production renders one JSON object per line; other environments use
    the console renderer. Tests only show warnings and errors.
    """
    level = LOG_LEVELS.get(environment, logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

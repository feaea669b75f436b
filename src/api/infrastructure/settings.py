"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging settings.

    Environment variables:
        SOCIAL_LOG_LEVEL: Minimum level emitted by structlog (default: INFO)
        SOCIAL_LOG_JSON_OUTPUT: Force JSON output even in a TTY (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: LogLevel = Field(default="INFO", description="Minimum log level")
    json_output: bool = Field(
        default=False,
        description="Always render logs as JSON",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections.

    Environment variables:
        SOCIAL_APP_NAME: Application name (default: Social API)
        SOCIAL_DEBUG: Debug mode (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Social API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def logging(self) -> LoggingSettings:
        """Get logging settings."""
        return get_logging_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return LoggingSettings()

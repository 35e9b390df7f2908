"""Configuration loading for the purchasing service.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Order store configuration
    store_sqlite_path: str = Field(
        default="./data/orders.db",
        description="SQLite database file path",
    )

    # Event publisher configuration
    publisher_backend: Literal["stdout", "jsonl", "webhook"] = Field(
        default="stdout",
        description="Event publisher backend type",
    )
    publisher_output_path: str = Field(
        default="./events/cancellations.jsonl",
        description="Output file for JSON Lines notifications",
    )
    webhook_url: str = Field(
        default="",
        description="Endpoint receiving cancellation notifications via POST",
    )
    webhook_timeout_seconds: float = Field(
        default=10.0,
        description="HTTP timeout for webhook delivery in seconds",
    )

    # Session configuration
    session_id: int = Field(
        default=0,
        description="Session identifier stamped on published notifications",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("webhook_timeout_seconds")
    @classmethod
    def validate_webhook_timeout(cls, v: float) -> float:
        """Ensure webhook timeout is positive."""
        if v <= 0:
            raise ValueError("webhook_timeout_seconds must be positive")
        return v

    @field_validator("session_id")
    @classmethod
    def validate_session_id(cls, v: int) -> int:
        """Ensure session id is non-negative."""
        if v < 0:
            raise ValueError("session_id must be non-negative")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

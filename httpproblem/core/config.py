"""
Configuration management using Pydantic Settings.

Settings are loaded from environment variables prefixed with `HTTPPROBLEM_`.
All values have safe defaults so the library works without any configuration.

Usage:
    from httpproblem.core.config import get_settings

    settings = get_settings()
    base = settings.type_base_url

Tests that change the environment must call `get_settings.cache_clear()`.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from httpproblem.core.constants import CONTENT_PROBLEM_DETAILS, DEFAULT_TYPE_BASE_URL
from httpproblem.core.enums import Environment


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (HTTPPROBLEM_*)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    type_base_url: str = Field(
        default=DEFAULT_TYPE_BASE_URL,
        description="Base URL of the default problem type URI; the status code is appended",
    )
    content_type: str = Field(
        default=CONTENT_PROBLEM_DETAILS,
        description="Content-Type header value for problem responses",
    )

    model_config = SettingsConfigDict(
        env_prefix="HTTPPROBLEM_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("type_base_url")
    @classmethod
    def validate_type_base_url(cls, v: str) -> str:
        """
        Ensure exactly one trailing slash so the status can be appended.

        Args:
            v: URL string.

        Returns:
            str: URL ending with a single slash.
        """
        return v.rstrip("/") + "/"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return level

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """Machine-readable logs are used everywhere except local development."""
        return self.environment != Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()

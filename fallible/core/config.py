"""
Configuration management using Pydantic Settings.

The result algebra itself is configuration-free; these settings only steer
the structured logging it emits at its boundaries (captured exceptions,
errors handed back to imperative code).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from FALLIBLE_* environment variables
- Type validation via Pydantic

Usage:
    from fallible.core.config import settings

    if settings.use_json_logs:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fallible.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (FALLIBLE_ prefix)
        2. Default values

    The module-level ``settings`` instance is built at import time, so an
    invalid ``FALLIBLE_*`` value (e.g. ``FALLIBLE_LOG_LEVEL=VERBOSE``) makes
    ``import fallible`` raise ``pydantic.ValidationError``.

    Returns:
        Settings: Library configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON (True) or console (False) log output. "
        "Unset picks JSON everywhere except development.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalise the log level name.

        Args:
            v: Log level name, any case.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
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
    def use_json_logs(self) -> bool:
        """Whether log output should be rendered as JSON."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()

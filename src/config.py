"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Variables use the ``REWARDS_`` prefix, e.g. ``REWARDS_STRICT=true``.
    """

    model_config = SettingsConfigDict(
        env_prefix="REWARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reward file used when the CLI is not given one
    rewards_file: str = "rewards.yaml"

    # Abort loading on the first bad descriptor instead of skipping it
    strict: bool = False

    # Logging
    log_level: LogLevel = "INFO"
    debug: bool = False

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG when debug is on."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

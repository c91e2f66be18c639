"""Configuration management using Pydantic settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Command line defaults loaded from environment variables.

    The library functions take their options as arguments and never read
    these settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sanitizer defaults
    extended: bool = Field(default=True, validation_alias="SAFEFILENAME_EXTENDED")
    remove: bool = Field(default=False, validation_alias="SAFEFILENAME_REMOVE")
    allow_empty: bool = Field(default=True, validation_alias="SAFEFILENAME_ALLOW_EMPTY")

    # Logging
    log_level: str = Field(default="WARNING", validation_alias="SAFEFILENAME_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TYPESTATE_",
        case_sensitive=False,
    )

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(name)s %(levelname)s: %(message)s"

    # Verification settings
    verification_marker: str = "ok"  # Substring that marks an address as confirmed

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Accept stdlib level names in any case, stored upper-cased."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("verification_marker")
    @classmethod
    def check_marker(cls, v: str) -> str:
        """Reject an empty marker, which would confirm every address."""
        if not v:
            raise ValueError("verification_marker must not be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

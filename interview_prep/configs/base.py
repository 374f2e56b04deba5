"""
Shared settings foundation.

Every settings class reads the same .env file; env_config builds the
per-module config with its variable prefix.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


def env_config(prefix: str = "") -> SettingsConfigDict:
    """
    Build the settings config shared by all modules.

    Args:
        prefix: Environment variable prefix, e.g. "POSTGRES_"

    Returns:
        SettingsConfigDict: Config reading ENV_FILE, case-insensitive
    """
    return SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=prefix,
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Process-wide settings: deployment environment and log level."""

    model_config = env_config()

    environment: str = Field(
        default="development",
        description="Deployment environment name, attached to the startup log",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

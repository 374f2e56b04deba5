"""
Authentication configuration settings.

Shared secret and algorithm used to verify bearer tokens issued by the
auth service.

Dependencies: pydantic_settings
System role: Token verification configuration
"""

from pydantic import Field
from interview_prep.configs.base import BaseSettings, env_config


class AuthSettings(BaseSettings):
    """JWT verification configuration."""

    model_config = env_config("JWT_")

    secret_key: str = Field(default="change-this-secret-key-in-production-deployments", description="JWT signing secret")
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")

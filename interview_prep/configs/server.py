"""
HTTP server configuration settings.

Dependencies: pydantic_settings
System role: Server bind address and CORS configuration
"""

from pydantic import Field
from interview_prep.configs.base import BaseSettings, env_config


class ServerSettings(BaseSettings):
    """API server configuration."""

    model_config = env_config("API_")

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Split configured origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

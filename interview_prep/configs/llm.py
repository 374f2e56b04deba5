"""
Generation model configuration settings.

Settings for the Google Gemini chat model used to generate interview
questions and concept explanations.

Dependencies: pydantic_settings
System role: LLM configuration for the generation gateway
"""

from pydantic import Field
from interview_prep.configs.base import BaseSettings, env_config


class GeminiSettings(BaseSettings):
    """Google Gemini configuration."""

    model_config = env_config("GEMINI_")

    api_key: str = Field(default="", description="Google Generative AI API key")
    model: str = Field(default="gemini-2.0-flash-lite", description="Gemini model ID")
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_questions: int = Field(
        default=20,
        description="Upper bound on questions generated per request",
    )

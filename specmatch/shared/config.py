"""Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from specmatch.infrastructure.llm.constants import (
    ANTHROPIC_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    api_title: str = Field(default="Spec Match Verification", description="API title")
    api_version: str = Field(default="0.1.0", description="API version")

    # Anthropic Claude Configuration
    anthropic_api_key: str = Field(
        default="", description="Anthropic API key (required to build the provider)"
    )
    anthropic_model: str = Field(default=DEFAULT_MODEL, description="Claude model identifier")
    anthropic_base_url: str = Field(
        default=ANTHROPIC_BASE_URL, description="Base URL of the Anthropic Messages API"
    )
    anthropic_max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS, ge=1, le=64000, description="Token ceiling for the reply"
    )
    anthropic_timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Timeout for Anthropic API calls in seconds (None = no client-side timeout)",
    )

    # Request limits
    max_files: int = Field(
        default=200, ge=1, le=10000, description="Maximum number of files per verification request"
    )
    max_file_chars: int = Field(
        default=200_000, ge=1, description="Maximum size of a single file's content in characters"
    )

    # CORS Configuration
    cors_allowed_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

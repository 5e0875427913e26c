"""Dependency injection for FastAPI.

Provides singleton instances of infrastructure components and per-request services.
"""

from functools import lru_cache

from specmatch.application.verification_service import VerificationService
from specmatch.infrastructure.llm.client import ClaudeProvider
from specmatch.shared.config import Settings


@lru_cache
def get_settings() -> Settings:
    """Get application settings (singleton)."""
    return Settings()


@lru_cache
def get_verification_provider() -> ClaudeProvider:
    """Get the verification provider (singleton).

    Cached for connection pooling and client reuse. Built lazily so the
    service starts without credentials; the first request then fails with
    ConfigurationError instead.

    Raises:
        ConfigurationError: If ANTHROPIC_API_KEY is not set
    """
    return ClaudeProvider.from_settings(get_settings())


def get_verification_service() -> VerificationService:
    """Get verification service (per-request)."""
    return VerificationService(provider=get_verification_provider())

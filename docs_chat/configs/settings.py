"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docs_chat.configs.base import BaseSettings
from docs_chat.configs.bedrock import BedrockSettings
from docs_chat.configs.documents import DocumentSettings
from docs_chat.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    bedrock: BedrockSettings = Field(default_factory=BedrockSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    documents: DocumentSettings = Field(default_factory=DocumentSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from docs_chat.configs import get_settings
        settings = get_settings()
    """
    return Settings()

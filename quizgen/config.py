"""
Configuration settings for quizgen.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # AI Integration
    # ========================================
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_api_key", "api_key"),
        description="Google Generative AI (Gemini) API key",
    )
    ai_model: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini model used for quiz and study guide generation",
    )

    # ========================================
    # Generation Limits
    # ========================================
    content_char_limit: int = Field(
        default=20000,
        gt=0,
        description="Source material is cut to this many characters before prompting",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Minimum loguru level for the CLI stderr sink",
    )

    def has_ai_configured(self) -> bool:
        """Check if a Gemini API key is available."""
        return bool(self.gemini_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

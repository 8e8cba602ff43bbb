"""
Centralized configuration for the Text Workbench backend.
Uses Pydantic Settings to load from environment variables and .env file.
"""

from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── Metrics ──
    reading_words_per_minute: int = 200
    repeated_word_limit: int = 5

    # ── Request limits ──
    max_text_length: int = 100_000

    # ── CORS ──
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ── Rate Limiting ──
    rate_limit_per_minute: int = 120

    # ── Application ──
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def rate_limit(self) -> str:
        return f"{self.rate_limit_per_minute}/minute"


@lru_cache()
def get_settings() -> Settings:
    """Cached singleton for application settings."""
    return Settings()

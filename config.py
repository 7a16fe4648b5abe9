"""
Configuration settings for the quiz trainer.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
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
    # Database
    # ========================================
    database_url: str = Field(
        default="sqlite:///quizzes.sqlite",
        description="SQLAlchemy connection string for the quiz store",
    )
    seed_quizzes: bool = Field(
        default=True,
        description="Insert the starter quizzes when the store is empty",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # Shell
    # ========================================
    prompt: str = Field(
        default="quiz > ",
        description="Prompt shown by the interactive shell",
    )
    credits_authors: list[str] = Field(
        default_factory=lambda: ["Quiz Trainer contributors"],
        description="Names listed by the credits command",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    def is_sqlite(self) -> bool:
        """True when the quiz store lives in a SQLite database."""
        return self.database_url.startswith("sqlite")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

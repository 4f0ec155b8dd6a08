"""Configuration management for CV Refiner."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CV_REFINER_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Reference cohort
    references_path: Path | None = Field(
        default=None,
        description="JSON file holding reference resume fingerprints",
    )
    max_references: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Maximum number of reference resumes used per scoring run",
    )

    # Text anchoring
    fuzzy_max_needle_length: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Longest suggestion text that is still fuzzy-matched",
    )
    fuzzy_min_similarity: float = Field(
        default=60.0,
        ge=0,
        le=100,
        description="Minimum similarity (0-100) for a fuzzy hit",
    )
    fuzzy_word_index_max_length: int = Field(
        default=10,
        ge=0,
        le=100,
        description="Needles up to this length are also matched against single words",
    )

    # Generator output
    max_generated_suggestions: int = Field(
        default=25,
        ge=1,
        le=100,
        description="Cap on suggestions accepted from the text generator",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() to share one instance across the process.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.match_auto_accept_threshold)

    # Tests: bypass .env and the process environment
    settings = Settings(_env_file=None)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.core.constants import (
    MATCH_AUTO_ACCEPT_THRESHOLD,
    MATCH_PREFILTER_CUTOFF,
    SIMILARITY_WARP,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="WARNING",
        description="Root logging level for the command-line tool",
    )

    # -------------------------------------------------------------------------
    # Name Matching
    # -------------------------------------------------------------------------
    match_prefilter_cutoff: float = Field(
        default=MATCH_PREFILTER_CUTOFF,
        description="Minimum similarity a candidate needs to be considered at all",
    )
    match_auto_accept_threshold: float = Field(
        default=MATCH_AUTO_ACCEPT_THRESHOLD,
        description="Fuzzy matches scoring above this are auto-corrected silently",
    )
    match_similarity_warp: float = Field(
        default=SIMILARITY_WARP,
        description="Bigram similarity warp exponent (1.0 = plain Jaccard)",
    )
    match_cache_indices: bool = Field(
        default=False,
        description="Keep one similarity index per category instead of rebuilding per lookup",
    )

    # -------------------------------------------------------------------------
    # Data
    # -------------------------------------------------------------------------
    dictionaries_dir: Optional[str] = Field(
        default=None,
        description="Override directory for the canonical name dictionaries",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator("match_prefilter_cutoff", "match_auto_accept_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Thresholds are compared against scores in [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Threshold {v} must be between 0.0 and 1.0")
        return v

    @field_validator("match_similarity_warp")
    @classmethod
    def validate_warp(cls, v: float) -> float:
        if not 1.0 <= v <= 3.0:
            raise ValueError(f"Similarity warp {v} must be between 1.0 and 3.0")
        return v

    @model_validator(mode="after")
    def validate_threshold_order(self) -> "Settings":
        """Auto-accept must sit above the pre-filter, or every candidate would be accepted."""
        if self.match_auto_accept_threshold <= self.match_prefilter_cutoff:
            raise ValueError(
                f"match_auto_accept_threshold ({self.match_auto_accept_threshold}) must be "
                f"greater than match_prefilter_cutoff ({self.match_prefilter_cutoff})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()

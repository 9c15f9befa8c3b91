"""
Global configuration for the FootyAI project.

This module centralizes the Gemini model parameters, UI messages and the
environment-backed settings, so you can tweak them in one place.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root = folder that contains "src", "tests", ".env", etc.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]
ENV_FILE: Path = PROJECT_ROOT / ".env"

# Gemini generation parameters
DEFAULT_MODEL: str = "gemini-3-pro-preview"
DEFAULT_TEMPERATURE: float = 0.2
RESPONSE_MIME_TYPE: str = "application/json"

# Prompt parameters
DEFAULT_SPORT: str = "football"
DEFAULT_EXPLANATION_LANGUAGE: str = "Bengali"
FALLBACK_SOURCE_TITLE: str = "Web Source"

# Error codes and user-facing messages
REAUTH_NEEDED: str = "REAUTH_NEEDED"
ANALYSIS_FAILED_MESSAGE: str = "Analysis failed. Please try again."
CONNECTION_FAILED_MESSAGE: str = "Analysis failed. Please check your connection."
REAUTH_MESSAGE: str = (
    "Your AI session expired or the API key is invalid. Please reconnect."
)

# Probability thresholds used by the dashboard (percent)
PROBABILITY_TIERS = [(80.0, "high"), (60.0, "good"), (40.0, "fair")]
STRONG_PICK_THRESHOLD: float = 70.0


class Settings(BaseSettings):
    """Environment-backed settings, loaded from .env and the OS environment."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    gemini_model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    explanation_language: str = DEFAULT_EXPLANATION_LANGUAGE
    log_level: str = "INFO"

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not str(v).strip():
            return None
        return str(v).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()

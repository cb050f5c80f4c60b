"""Application configuration with validation."""
from pathlib import Path
from typing import Optional, Literal
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Orbit Leadership Assessment"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Scoring
    PROFILE_TABLE: Literal["achiever", "archetype"] = Field(
        default="achiever",
        description="Profile classification table used for result labels",
    )

    # Assessments
    ASSESSMENT_CODE_LENGTH: int = Field(default=6, ge=4, le=12)
    QUESTION_CATALOG: Literal["core-24", "full-80"] = Field(
        default="core-24",
        description="Built-in catalog snapshot used when no catalog file is configured",
    )
    QUESTION_CATALOG_PATH: Optional[str] = Field(
        default=None,
        description="JSON catalog exported from the admin tool; overrides QUESTION_CATALOG",
    )

    @field_validator("QUESTION_CATALOG_PATH")
    @classmethod
    def validate_catalog_path(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not Path(v).is_file():
            raise ValueError(f"Question catalog file not found: {v}")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Settings for the generator API."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from binary_variations.generator.combination_generator import MAX_VARIATIONS


class Settings(BaseSettings):
    """Service settings, read from BINVAR_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="BINVAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_variations: int = Field(
        default=20,
        ge=1,
        le=MAX_VARIATIONS,
        description="Largest number of variations accepted per request"
    )
    chunk_size: int = Field(default=10000, gt=0, description="Rows per CSV file")
    preview_limit: int = Field(default=100, ge=1, le=1000, description="Default preview rows")
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

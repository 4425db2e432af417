# backend/storefront/config.py
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Client-side settings, read from STOREFRONT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", env_file=".env", extra="ignore", populate_by_name=True
    )

    API_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT: float = 10.0

    # Text-generation service used for "you might also like" suggestions
    SUGGESTION_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    SUGGESTION_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("STOREFRONT_SUGGESTION_API_KEY", "GEMINI_API_KEY"),
    )
    SUGGESTION_MODEL: str = "gemini-3-flash-preview"
    SUGGESTION_TIMEOUT: float = 5.0
    SUGGESTION_COUNT: int = 3


def get_settings() -> StorefrontSettings:
    return StorefrontSettings()

"""
Client configuration management.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://app.respectify.org"
DEFAULT_API_VERSION = "0.2"
DEFAULT_TIMEOUT_SECONDS = 30.0


class Settings(BaseSettings):
    """Client settings loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    respectify_email: str
    respectify_api_key: str

    # Endpoint
    respectify_base_url: str = DEFAULT_BASE_URL
    respectify_api_version: str = DEFAULT_API_VERSION
    respectify_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Application
    log_level: str = "INFO"

    # Live-API test toggles
    use_real_api: bool = False
    real_article_id: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """Load settings once; raises pydantic.ValidationError if credentials are missing."""
    return Settings()

"""
Application configuration using Pydantic Settings
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Content API
    API_URL: str = "https://api-gateway.central.jesusfilm.org"
    API_CLIENT_NAME: str = "jfp-app-cache-builder"
    GIT_COMMIT_SHA: str = ""
    API_TIMEOUT: Optional[float] = None  # None waits indefinitely

    # Extraction
    PAGE_SIZE: int = 100

    # Stores
    ASSETS_DIR: Path = Path("assets")
    SQL_ECHO: bool = False

    # Run defaults
    DEFAULT_LANGUAGE_ID: str = "529"
    DEFAULT_LANGUAGE_TAG: str = "en"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()

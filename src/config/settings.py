"""
Application settings using Pydantic Settings.

Environment variables are loaded from .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from src.config.constants import CAMPAIGN_FINANCE_BASE_URL


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Create a .env file in the project root with these values.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ========================================================================
    # Campaign Finance API
    # ========================================================================

    # ProPublica Campaign Finance API (key sent as X-API-Key header)
    PROPUBLICA_API_KEY: Optional[str] = None

    CAMPAIGN_FINANCE_BASE_URL: str = CAMPAIGN_FINANCE_BASE_URL
    HTTP_TIMEOUT: float = 30.0

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ========================================================================
    # Application
    # ========================================================================
    APP_NAME: str = "Candidate Watchdog"
    APP_VERSION: str = "0.1.0"


# Singleton instance
settings = Settings()

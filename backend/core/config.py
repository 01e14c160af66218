"""
Centralized configuration for the Bakehouse backend.

All environment variables and settings should be defined here
to avoid duplication across modules.
"""
import os
from functools import lru_cache


class Settings:
    """Application settings loaded from environment variables."""

    # CORS - comma-separated list of allowed origins
    ALLOWED_ORIGINS: list = os.environ.get(
        "ALLOWED_ORIGINS",
        "http://localhost:3009,http://127.0.0.1:3009"
    ).split(",")

    # Database
    DB_PATH: str = os.environ.get("BAKEHOUSE_DB_PATH", "data/bakehouse.db")

    # API key for protecting outbound/destructive endpoints (optional)
    API_KEY: str = os.environ.get("BAKEHOUSE_API_KEY", "")

    # Zalo group messaging (notification delivery channel)
    ZALO_URL: str = os.environ.get("ZALO_URL", "")
    ZALO_SHOP_CODE: str = os.environ.get("ZALO_SHOP_CODE", "")
    ZALO_TOKEN: str = os.environ.get("ZALO_TOKEN", "")
    ZALO_FROM_NUMBER: str = os.environ.get("ZALO_FROM_NUMBER", "")
    ZALO_GROUP_ID: str = os.environ.get("ZALO_GROUP_ID", "")
    ZALO_TIMEOUT: int = int(os.environ.get("ZALO_TIMEOUT", "15"))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for easy import
settings = get_settings()

"""
Configuration management.
Simple .env based config, shops are passed in as a JSON list.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Shop configuration is missing or malformed."""
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Shops: JSON list of {"name", "domain", "token"}
    shopify_shops: str = ""
    representative_shop: str = ""

    # Shopify API
    shopify_api_version: str = "2025-01"
    request_timeout: float = 30.0  # seconds
    connect_timeout: float = 10.0  # seconds

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()

"""
Configuration management for the Steam store client.

Supports configuration via environment variables and .env files.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "http://store.steampowered.com/api/appdetails/"


class StoreConfig(BaseSettings):
    """
    Configuration settings for the Steam store client.

    All settings can be configured via environment variables with the STEAMSTORE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEAMSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Endpoint settings
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=1,
        description="appdetails endpoint queried for every batch"
    )
    api_version: int = Field(
        default=1,
        ge=1,
        description="Value sent as the v= query parameter"
    )

    # Query defaults
    locale: str = Field(
        default="english",
        description="Default locale (l= parameter)"
    )
    currency: str = Field(
        default="us",
        description="Default country/currency code (cc= parameter)"
    )

    # Batching parameters
    batch_size: int = Field(
        default=50,
        ge=1,
        le=100,
        description="Maximum number of appids in a single request"
    )

    # HTTP settings
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single batch request"
    )
    user_agent: str = Field(
        default="steamstore/0.1.0",
        min_length=1,
        description="User-Agent header sent with every request"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )


# Global config instance
_config: Optional[StoreConfig] = None


def get_config() -> StoreConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = StoreConfig()
    return _config


def set_config(config: StoreConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config

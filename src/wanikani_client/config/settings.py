"""
Configuration settings for the WaniKani client.

Values are read from ``WANIKANI_``-prefixed environment variables or a
``.env`` file, validated by pydantic. Explicit constructor arguments on the
clients take precedence over anything configured here.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_BASE_URL = "https://www.wanikani.com/api"
DEFAULT_API_VERSION = "v1.4"


class Settings(BaseSettings):
    """
    WaniKani client configuration settings.

    All settings can be overridden via environment variables.
    """

    # API
    api_key: Optional[str] = Field(
        default=None,
        description="Personal WaniKani API key"
    )
    api_base_url: str = Field(
        default=API_BASE_URL,
        description="Base URL of the WaniKani API"
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="API version segment inserted after the base URL"
    )
    request_timeout: float = Field(
        default=30,
        gt=0,
        description="Timeout in seconds for API requests"
    )

    # Addressing
    trailing_comma: bool = Field(
        default=True,
        description="Terminate every level in a level list with a comma"
    )
    quote_api_key: bool = Field(
        default=False,
        description="Percent-encode the API key instead of rejecting unsafe characters"
    )

    # Decoding
    item_shape: Literal["tagged", "legacy"] = Field(
        default="tagged",
        description="Item encoding revision to decode (tagged or legacy)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="Logging format (json or text)"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable loguru backtrace and diagnose output"
    )

    model_config = SettingsConfigDict(
        env_prefix="WANIKANI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()

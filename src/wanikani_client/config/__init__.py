"""Configuration module for the WaniKani client."""

from .settings import API_BASE_URL, DEFAULT_API_VERSION, Settings, get_settings

__all__ = ["API_BASE_URL", "DEFAULT_API_VERSION", "Settings", "get_settings"]

"""
Unit tests for configuration and logging setup.
"""

import pytest
from pydantic import ValidationError
from unittest.mock import Mock, patch

from loguru import logger

from wanikani_client.api.client import WaniKaniClient
from wanikani_client.config import API_BASE_URL, DEFAULT_API_VERSION, Settings, get_settings
from wanikani_client.models import ItemShape
from wanikani_client.utils.logging import get_logger, setup_logging


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.api_key is None
        assert settings.api_base_url == API_BASE_URL
        assert settings.api_version == DEFAULT_API_VERSION == "v1.4"
        assert settings.request_timeout == 30
        assert settings.trailing_comma is True
        assert settings.quote_api_key is False
        assert settings.item_shape == "tagged"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WANIKANI_API_KEY", "env-key")
        monkeypatch.setenv("WANIKANI_API_VERSION", "v1.3")
        monkeypatch.setenv("WANIKANI_TRAILING_COMMA", "false")
        monkeypatch.setenv("WANIKANI_ITEM_SHAPE", "legacy")

        settings = Settings()

        assert settings.api_key == "env-key"
        assert settings.api_version == "v1.3"
        assert settings.trailing_comma is False
        assert settings.item_shape == "legacy"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("WANIKANI_API_KEY=file-key\nWANIKANI_REQUEST_TIMEOUT=5\n")

        settings = Settings()

        assert settings.api_key == "file-key"
        assert settings.request_timeout == 5

    def test_invalid_item_shape(self, monkeypatch):
        monkeypatch.setenv("WANIKANI_ITEM_SHAPE", "v0")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_client_reads_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("WANIKANI_API_KEY", "env-key")
        monkeypatch.setenv("WANIKANI_ITEM_SHAPE", "legacy")

        client = WaniKaniClient()

        assert client.api_key == "env-key"
        assert client.item_shape is ItemShape.LEGACY


class TestLogging:
    """Test cases for loguru setup."""

    def test_setup_logging_replaces_default_handler(self):
        with patch('wanikani_client.utils.logging.logger') as mock_logger:
            setup_logging("debug")

        mock_logger.enable.assert_called_once_with("wanikani_client")
        mock_logger.remove.assert_called_once_with()
        kwargs = mock_logger.add.call_args[1]
        assert kwargs["level"] == "DEBUG"
        assert kwargs["serialize"] is False

    def test_json_format_serialises(self, monkeypatch):
        monkeypatch.setenv("WANIKANI_LOG_FORMAT", "json")

        with patch('wanikani_client.utils.logging.logger') as mock_logger:
            setup_logging()

        kwargs = mock_logger.add.call_args[1]
        assert kwargs["serialize"] is True
        assert kwargs["level"] == "INFO"

    def test_get_logger_binds_name(self):
        with patch('wanikani_client.utils.logging.logger') as mock_logger:
            get_logger("wanikani_client.test")

        mock_logger.bind.assert_called_once_with(name="wanikani_client.test")

    def test_library_records_are_disabled_without_setup(self):
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG")
        try:
            WaniKaniClient(api_key="env-key", session=Mock())
        finally:
            logger.remove(sink_id)

        assert messages == []

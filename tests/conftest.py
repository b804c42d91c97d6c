"""Project-level pytest configuration and shared fixtures."""

import os

import pytest

from wanikani_client.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests independent of the caller's WANIKANI_* environment and .env file."""
    for name in list(os.environ):
        if name.upper().startswith("WANIKANI_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

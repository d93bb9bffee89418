"""Tests for settings, credentials and logging setup."""

import sys

from loguru import logger

from easiware_piece.core.config import Settings, get_settings, settings
from easiware_piece.core.logging import configure_logging
from easiware_piece.integrations.easiware import EasiwareAuth


def test_settings_defaults():
    """Test default settings values."""
    fresh = Settings(_env_file=None)

    assert fresh.PROJECT_NAME == "Easiware"
    assert fresh.EASIWARE_HTTP_TIMEOUT > 0
    assert get_settings() is settings


def test_settings_read_environment(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("EASIWARE_API_URL", "https://eu.easiware.test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    fresh = Settings(_env_file=None)

    assert fresh.EASIWARE_API_URL == "https://eu.easiware.test"
    assert fresh.LOG_LEVEL == "DEBUG"


def test_auth_from_settings(monkeypatch):
    """Test building credentials from the global settings."""
    monkeypatch.setattr(settings, "EASIWARE_API_URL", "https://api.easiware.test/")
    monkeypatch.setattr(settings, "EASIWARE_API_KEY", "env-key")

    auth = EasiwareAuth.from_settings()

    assert auth.api_key == "env-key"
    assert auth.base_url == "https://api.easiware.test"


def test_auth_accepts_host_form_names():
    """Test that the host credential form keys populate the model."""
    auth = EasiwareAuth.model_validate({"appUrl": "https://x.test", "apiKey": "k"})

    assert auth.app_url == "https://x.test"
    assert auth.headers() == {"Authorization": "Bearer k", "Content-Type": "application/json"}


def test_auth_default_url():
    """Test the default cloud API URL."""
    assert EasiwareAuth(api_key="k").app_url == "https://api.easiware.com"


def test_configure_logging_uses_given_level():
    """Test configuring the loguru sink."""
    try:
        assert configure_logging("debug") == "DEBUG"
    finally:
        logger.remove()
        logger.add(sys.stderr)

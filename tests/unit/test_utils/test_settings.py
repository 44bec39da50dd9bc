"""
Unit tests for settings and logging configuration.
"""

import logging

import pytest
from monkey.utils import DEFAULT_SETTINGS, Settings, configure_logging


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.trace_tokens is False
        assert "DEBUG" in settings.valid_log_levels
        assert settings.level == logging.WARNING

    def test_level_is_case_insensitive(self):
        """Test that lowercase level names resolve."""
        assert Settings(log_level="debug").level == logging.DEBUG

    def test_invalid_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            Settings(log_level="LOUD").level

    def test_default_instance(self):
        """Test the global default settings."""
        assert isinstance(DEFAULT_SETTINGS, Settings)
        assert DEFAULT_SETTINGS.trace_tokens is False


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_package_level(self):
        """Test that the package logger picks up the configured level."""
        package_logger = logging.getLogger("monkey")
        previous = package_logger.level
        try:
            configure_logging(Settings(log_level="DEBUG"))
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)

    def test_invalid_level_raises(self):
        """Test that invalid settings fail before touching logging."""
        with pytest.raises(ValueError):
            configure_logging(Settings(log_level="nope"))

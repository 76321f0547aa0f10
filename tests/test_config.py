"""Tests for the config module."""

import logging
from pathlib import Path

import pytest

from columnsmith.config import (
    Settings,
    _parse_cors_origins,
    _parse_optional_path,
    configure_logging,
)


class TestParseCorsOrigins:
    """Test CORS origins parsing."""

    def test_parse_cors_origins_with_value(self, monkeypatch):
        """Test parsing CORS origins from environment variable."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:8080")
        result = _parse_cors_origins()
        assert result == ["http://localhost:3000", "http://localhost:8080"]

    def test_parse_cors_origins_without_value(self, monkeypatch):
        """Test default CORS origins when not set."""
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
        assert _parse_cors_origins() == ["*"]

    def test_parse_cors_origins_empty_string(self, monkeypatch):
        """Test parsing empty CORS origins defaults to wildcard."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "")
        assert _parse_cors_origins() == ["*"]


class TestParseOptionalPath:
    """Test optional path parsing."""

    def test_set(self, monkeypatch):
        """Test that a set variable becomes a Path."""
        monkeypatch.setenv("ALIAS_REGISTRY_PATH", "config/aliases.json")
        assert _parse_optional_path("ALIAS_REGISTRY_PATH") == Path("config/aliases.json")

    def test_unset_or_empty(self, monkeypatch):
        """Test that unset and empty variables give None."""
        monkeypatch.delenv("ALIAS_REGISTRY_PATH", raising=False)
        assert _parse_optional_path("ALIAS_REGISTRY_PATH") is None
        monkeypatch.setenv("ALIAS_REGISTRY_PATH", "")
        assert _parse_optional_path("ALIAS_REGISTRY_PATH") is None


class TestSettings:
    """Test Settings configuration."""

    def test_settings_with_custom_values(self, tmp_path):
        """Test Settings initialization with explicit values."""
        settings = Settings(
            acceptance_threshold=0.6,
            suggestion_threshold=0.3,
            max_suggestions=5,
            alias_registry_path=tmp_path / "aliases.json",
            port=9000,
        )

        assert settings.acceptance_threshold == 0.6
        assert settings.suggestion_threshold == 0.3
        assert settings.max_suggestions == 5
        assert settings.alias_registry_path == tmp_path / "aliases.json"
        assert settings.port == 9000

    def test_settings_types(self):
        """Test that default settings have the expected types."""
        settings = Settings()

        assert isinstance(settings.acceptance_threshold, float)
        assert isinstance(settings.suggestion_threshold, float)
        assert isinstance(settings.max_suggestions, int)
        assert isinstance(settings.max_headers, int)
        assert isinstance(settings.cors_allow_origins, list)
        assert settings.suggestion_threshold < settings.acceptance_threshold


class TestConfigureLogging:
    """Test root logger configuration."""

    def test_sets_root_level(self, restore_root_logger):
        """Test that the root logger takes the requested level."""
        configure_logging("DEBUG")
        assert restore_root_logger.level == logging.DEBUG

        configure_logging("warning")
        assert restore_root_logger.level == logging.WARNING

    def test_installs_a_handler(self, restore_root_logger):
        """Test that the root logger has somewhere to write after configuration."""
        configure_logging("INFO")
        assert restore_root_logger.handlers

    def test_unknown_level(self, restore_root_logger):
        """Test that an unknown level name is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")

"""
Tests for settings module.

Tests settings validation and environment variable loading.
"""
from __future__ import annotations

import logging

import pytest

from tuf_memstore.constants import MAX_DOWNLOAD_SIZE
from tuf_memstore.settings import Settings, create_settings_from_env


class TestSettings:
    """Test Settings dataclass validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.max_download_size == MAX_DOWNLOAD_SIZE == 100 * 1024 * 1024
        assert settings.hash_algorithm == "sha256"
        assert settings.log_level == "WARNING"
        assert settings.log_level_value == logging.WARNING

    def test_custom_values(self):
        settings = Settings(max_download_size=1024, hash_algorithm="sha512", log_level="debug")
        assert settings.max_download_size == 1024
        assert settings.hash_algorithm == "sha512"
        assert settings.log_level_value == logging.DEBUG

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_download_size_rejected(self, size):
        with pytest.raises(ValueError, match="max_download_size must be positive"):
            Settings(max_download_size=size)

    def test_unknown_hash_rejected(self):
        with pytest.raises(ValueError, match="Invalid hash_algorithm"):
            Settings(hash_algorithm="md5")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Invalid log_level"):
            Settings(log_level="LOUD")

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.max_download_size = 1


class TestSettingsFromEnv:
    """Test environment variable loading."""

    def test_defaults_when_unset(self):
        assert create_settings_from_env() == Settings()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TUF_MEMSTORE_MAX_DOWNLOAD_SIZE", "2048")
        monkeypatch.setenv("TUF_MEMSTORE_HASH_ALGORITHM", "SHA512")
        monkeypatch.setenv("TUF_MEMSTORE_LOG_LEVEL", "info")

        settings = create_settings_from_env()
        assert settings.max_download_size == 2048
        assert settings.hash_algorithm == "sha512"
        assert settings.log_level == "INFO"

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("TUF_MEMSTORE_MAX_DOWNLOAD_SIZE", "lots")
        with pytest.raises(ValueError, match="must be an integer"):
            create_settings_from_env()

    def test_invalid_value_fails_fast(self, monkeypatch):
        monkeypatch.setenv("TUF_MEMSTORE_HASH_ALGORITHM", "crc32")
        with pytest.raises(ValueError):
            create_settings_from_env()

    def test_fresh_instance_each_call(self, monkeypatch):
        first = create_settings_from_env()
        monkeypatch.setenv("TUF_MEMSTORE_MAX_DOWNLOAD_SIZE", "10")
        second = create_settings_from_env()
        assert first.max_download_size == MAX_DOWNLOAD_SIZE
        assert second.max_download_size == 10

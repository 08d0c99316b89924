"""
Settings and configuration for the in-memory metadata store.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables at store or CLI construction time.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_HASH_ALGORITHM,
    ENV_HASH_ALGORITHM,
    ENV_LOG_LEVEL,
    ENV_MAX_DOWNLOAD_SIZE,
    MAX_DOWNLOAD_SIZE,
    SUPPORTED_HASH_ALGORITHMS,
)

__all__ = ["Settings", "create_settings_from_env"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for metadata stores.

    Attributes:
        max_download_size: Byte cap applied when get_sized() is called with
            NO_SIZE_LIMIT
        hash_algorithm: Digest used to build consistent names ("sha256" | "sha512")
        log_level: Root log level configured by the CLI
    """
    max_download_size: int = MAX_DOWNLOAD_SIZE
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings on construction."""
        if self.max_download_size <= 0:
            raise ValueError(f"max_download_size must be positive, got {self.max_download_size}")

        if self.hash_algorithm not in SUPPORTED_HASH_ALGORITHMS:
            raise ValueError(
                f"Invalid hash_algorithm: {self.hash_algorithm}. "
                f"Must be one of: {', '.join(SUPPORTED_HASH_ALGORITHMS)}"
            )

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level.upper())


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - TUF_MEMSTORE_MAX_DOWNLOAD_SIZE (default: 104857600)
        - TUF_MEMSTORE_HASH_ALGORITHM (default: sha256)
        - TUF_MEMSTORE_LOG_LEVEL (default: WARNING)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
        This ensures test isolation and eliminates global state.
    """
    def get_int(key: str, default: int) -> int:
        value = os.getenv(key)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {value!r}") from None

    return Settings(
        max_download_size=get_int(ENV_MAX_DOWNLOAD_SIZE, MAX_DOWNLOAD_SIZE),
        hash_algorithm=os.getenv(ENV_HASH_ALGORITHM, DEFAULT_HASH_ALGORITHM).lower(),
        log_level=os.getenv(ENV_LOG_LEVEL, "WARNING").upper(),
    )

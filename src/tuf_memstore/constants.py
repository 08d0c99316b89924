"""
Shared constants for the in-memory trust-metadata store.
"""
from __future__ import annotations

# Sentinel passed to get_sized() when the caller does not know the size up front
NO_SIZE_LIMIT = -1

# Cap applied in place of NO_SIZE_LIMIT (timestamp and sometimes root are unsized)
MAX_DOWNLOAD_SIZE = 100 * 1024 * 1024

LOCATION = "memory"

DEFAULT_HASH_ALGORITHM = "sha256"
SUPPORTED_HASH_ALGORITHMS = ("sha256", "sha512")

# Environment variables read by create_settings_from_env()
ENV_MAX_DOWNLOAD_SIZE = "TUF_MEMSTORE_MAX_DOWNLOAD_SIZE"
ENV_HASH_ALGORITHM = "TUF_MEMSTORE_HASH_ALGORITHM"
ENV_LOG_LEVEL = "TUF_MEMSTORE_LOG_LEVEL"

__all__ = [
    "NO_SIZE_LIMIT",
    "MAX_DOWNLOAD_SIZE",
    "LOCATION",
    "DEFAULT_HASH_ALGORITHM",
    "SUPPORTED_HASH_ALGORITHMS",
    "ENV_MAX_DOWNLOAD_SIZE",
    "ENV_HASH_ALGORITHM",
    "ENV_LOG_LEVEL",
]

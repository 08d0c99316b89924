"""
In-memory trust-metadata store for testing update clients.
"""
from .constants import MAX_DOWNLOAD_SIZE, NO_SIZE_LIMIT
from .settings import Settings, create_settings_from_env
from .storage import MemoryStore, MetadataStore, MetaNotFound, StoreError

__version__ = "0.1.0"

__all__ = [
    "MemoryStore",
    "MetadataStore",
    "MetaNotFound",
    "StoreError",
    "Settings",
    "create_settings_from_env",
    "NO_SIZE_LIMIT",
    "MAX_DOWNLOAD_SIZE",
]

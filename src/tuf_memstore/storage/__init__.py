# Metadata store interfaces and the in-memory implementation

from .base import MetadataStore
from .errors import MetaNotFound, StoreError
from .memory import MemoryStore

__all__ = ["MetadataStore", "MemoryStore", "MetaNotFound", "StoreError"]

"""
Metadata store error classes.

Every store backend raises from this hierarchy so callers can handle a
missing document the same way whether it came from memory, disk or a server.
"""
from __future__ import annotations


class StoreError(Exception):
    """Base class for all metadata store errors."""
    pass


class MetaNotFound(StoreError):
    """
    Requested metadata is absent from the store.

    Raised when a name resolves in neither the role-name index nor the
    consistent-name index. Not retried and not fatal; the caller decides
    whether a missing role is acceptable.
    """

    def __init__(self, resource: str):
        super().__init__(f"{resource} trust data unavailable")
        self.resource = resource


__all__ = ["StoreError", "MetaNotFound"]

"""
Storage interfaces for trust-metadata stores.

These protocols define the boundary between update clients and storage
implementations, so tests can substitute the in-memory store wherever a
file- or network-backed store is expected.
"""
from __future__ import annotations

from typing import Iterator, Mapping, Protocol, runtime_checkable

from ..constants import NO_SIZE_LIMIT

__all__ = ["MetadataStore", "NO_SIZE_LIMIT"]


@runtime_checkable
class MetadataStore(Protocol):
    """Protocol for reading and writing named metadata blobs."""

    def get(self, name: str) -> bytes:
        """
        Retrieve the full metadata stored under name.

        Args:
            name: Role name, version-pinned alias ("1.root") or consistent name

        Returns:
            Metadata bytes

        Raises:
            MetaNotFound: If nothing is stored under name
        """
        ...

    def get_sized(self, name: str, size: int) -> bytes:
        """
        Retrieve at most size bytes of the metadata stored under name.

        Args:
            name: Role name, version-pinned alias or consistent name
            size: Byte limit, or NO_SIZE_LIMIT to apply the store maximum

        Returns:
            The metadata, truncated to size bytes if it is longer

        Raises:
            MetaNotFound: If nothing is stored under name
        """
        ...

    def set(self, name: str, blob: bytes) -> None:
        """Store blob under name, replacing any previous value."""
        ...

    def set_multi(self, metas: Mapping[str, bytes]) -> None:
        """Store several named blobs."""
        ...

    def remove(self, name: str) -> None:
        """Remove the metadata for name. Removing a missing name is not an error."""
        ...

    def remove_all(self) -> None:
        """Remove all metadata."""
        ...

    def location(self) -> str:
        """Human readable name for the storage location."""
        ...

    def list_files(self) -> Iterator[str]:
        """Names usable with get() directly, without modification."""
        ...

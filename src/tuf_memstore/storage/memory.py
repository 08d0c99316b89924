"""
In-memory metadata store for testing.

Emulates a remote trust-metadata repository entirely in memory. Every blob is
indexed twice: by its role name (plus a "<version>.<role>" alias when the
blob is signed metadata) and by its consistent name derived from a digest of
its bytes, so clients can fetch either the latest copy or an exact one.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, Mapping, Optional

from ..constants import LOCATION, NO_SIZE_LIMIT
from ..envelope import parse_version
from ..settings import Settings
from .base import MetadataStore
from .errors import MetaNotFound
from .naming import DigestFunc, NameFunc, consistent_name, digest_for, versioned_name

logger = logging.getLogger(__name__)

VersionParser = Callable[[bytes], Optional[int]]

__all__ = ["MemoryStore"]


class MemoryStore(MetadataStore):
    """
    Metadata store backed by two dicts.

    This is a test double; not for production use. Not thread-safe:
    callers sharing one instance across threads must serialize access.

    Args:
        initial: Optional seed of role name -> bytes. Seeds are indexed by
            consistent name but not version-parsed.
        settings: Store settings (max download size, hash algorithm)
        digest: Override for the digest function
        namer: Override for the consistent-name function
        version_parser: Override for the envelope version parser
    """

    def __init__(
        self,
        initial: Optional[Mapping[str, bytes]] = None,
        *,
        settings: Optional[Settings] = None,
        digest: Optional[DigestFunc] = None,
        namer: Optional[NameFunc] = None,
        version_parser: Optional[VersionParser] = None,
    ) -> None:
        self._settings = settings or Settings()
        self._digest = digest or digest_for(self._settings.hash_algorithm)
        self._namer = namer or consistent_name
        self._parse_version = version_parser or parse_version

        self._data: Dict[str, bytes] = {}
        self._consistent: Dict[str, bytes] = {}
        if initial:
            for name, blob in initial.items():
                blob = bytes(blob)
                self._data[name] = blob
                self._consistent[self._consistent_name(name, blob)] = blob
            logger.debug(f"Seeded memory store with {len(self._data)} entries")

    def _consistent_name(self, name: str, blob: bytes) -> str:
        return self._namer(name, self._digest(blob))

    def _lookup(self, name: str) -> bytes:
        blob = self._data.get(name)
        if blob is None:
            blob = self._consistent.get(name)
        if blob is None:
            raise MetaNotFound(resource=name)
        return blob

    def get(self, name: str) -> bytes:
        """Return the data stored under a role name or consistent name."""
        return self._lookup(name)

    def get_sized(self, name: str, size: int) -> bytes:
        """
        Return up to size bytes of the data stored under name.

        NO_SIZE_LIMIT is capped at settings.max_download_size: callers always
        know the size of everything but timestamp and sometimes root, neither
        of which should be exceptionally large.

        Raises:
            MetaNotFound: If name is in neither index
            ValueError: If size is negative and not NO_SIZE_LIMIT
        """
        if size == NO_SIZE_LIMIT:
            size = self._settings.max_download_size
        elif size < 0:
            raise ValueError(f"size must be non-negative or NO_SIZE_LIMIT, got {size}")

        blob = self._lookup(name)
        if len(blob) < size:
            return blob
        return blob[:size]

    def set(self, name: str, blob: bytes) -> None:
        """Store blob under name, its version alias and its consistent name."""
        blob = bytes(blob)
        self._data[name] = blob

        # No version means this is not signed metadata (e.g. a key)
        version = self._parse_version(blob)
        if version is not None:
            self._data[versioned_name(name, version)] = blob

        path = self._consistent_name(name, blob)
        self._consistent[path] = blob
        logger.debug(f"Stored {name} ({len(blob)} bytes, version={version}) as {path}")

    def set_multi(self, metas: Mapping[str, bytes]) -> None:
        """Store multiple pieces of metadata in a single call."""
        for name, blob in metas.items():
            self.set(name, blob)

    def remove(self, name: str) -> None:
        """
        Remove the metadata for a single role.

        Deletes the role-name entry and its consistent-name entry. Version
        aliases ("<version>.<role>") are kept so earlier versions stay
        addressable. Removing a missing name is a no-op.
        """
        blob = self._data.pop(name, None)
        if blob is None:
            return
        path = self._consistent_name(name, blob)
        self._consistent.pop(path, None)
        logger.debug(f"Removed {name} and {path}")

    def remove_all(self) -> None:
        """Reset the store to empty."""
        self._data = {}
        self._consistent = {}
        logger.debug("Cleared memory store")

    def location(self) -> str:
        return LOCATION

    def list_files(self) -> Iterator[str]:
        """
        Iterate over the role names (and version aliases) currently stored.

        The names are snapshotted when this is called. Consistent names are
        not listed.
        """
        return iter(list(self._data))

    def consistent_names(self) -> Iterator[str]:
        """Iterate over a snapshot of the consistent names currently stored."""
        return iter(list(self._consistent))

    def consistent_name_for(self, name: str) -> Optional[str]:
        """
        Consistent name under which the value for name is stored.

        Returns None when name is not stored or its consistent name is not in
        the consistent index (version aliases such as "1.root" never are).
        """
        blob = self._data.get(name)
        if blob is None:
            return None
        path = self._consistent_name(name, blob)
        if path not in self._consistent:
            return None
        return path

    def __contains__(self, name: object) -> bool:
        return name in self._data or name in self._consistent

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"MemoryStore(location={self.location()!r}, "
            f"names={len(self._data)}, consistent={len(self._consistent)})"
        )

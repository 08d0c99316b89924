"""
Load metadata files from disk into a store.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ..settings import Settings
from ..storage.memory import MemoryStore

logger = logging.getLogger(__name__)

__all__ = ["role_name_for", "read_directory", "load_directory"]


def role_name_for(path: Path) -> str:
    """
    Role name a metadata file is stored under.

    "root.json" -> "root"; files without a .json suffix keep their full name.
    """
    if path.suffix == ".json":
        return path.stem
    return path.name


def read_directory(directory: Path) -> Dict[str, bytes]:
    """
    Read every regular file directly under directory.

    Raises:
        FileNotFoundError: If directory does not exist
        NotADirectoryError: If directory is not a directory
    """
    if not directory.exists():
        raise FileNotFoundError(f"Metadata directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    metas: Dict[str, bytes] = {}
    for path in sorted(directory.iterdir()):
        if path.is_file():
            metas[role_name_for(path)] = path.read_bytes()
    logger.debug(f"Read {len(metas)} metadata files from {directory}")
    return metas


def load_directory(directory: Path, settings: Optional[Settings] = None) -> MemoryStore:
    """
    Build a fresh MemoryStore holding the metadata files in directory.

    Files go through MemoryStore.set_multi(), so signed metadata also gets
    its "<version>.<role>" alias.
    """
    store = MemoryStore(settings=settings)
    store.set_multi(read_directory(directory))
    return store

"""
Content-derived naming helpers.

Consistent snapshots publish each metadata file under a name that embeds a
digest of its bytes, so a reader pinned to a digest always gets the same
content. These helpers compute the digest and build the names.
"""
from __future__ import annotations

import hashlib
from typing import Callable, Dict

from ..constants import SUPPORTED_HASH_ALGORITHMS

DigestFunc = Callable[[bytes], bytes]
NameFunc = Callable[[str, bytes], str]

__all__ = [
    "DigestFunc",
    "NameFunc",
    "sha256_digest",
    "sha512_digest",
    "digest_for",
    "consistent_name",
    "versioned_name",
]


def sha256_digest(blob: bytes) -> bytes:
    return hashlib.sha256(blob).digest()


def sha512_digest(blob: bytes) -> bytes:
    return hashlib.sha512(blob).digest()


_DIGESTS: Dict[str, DigestFunc] = {
    "sha256": sha256_digest,
    "sha512": sha512_digest,
}


def digest_for(algorithm: str) -> DigestFunc:
    """
    Look up the digest function for a hash algorithm name.

    Args:
        algorithm: One of SUPPORTED_HASH_ALGORITHMS (case-insensitive)

    Returns:
        Function mapping bytes to a raw (not hex) digest

    Raises:
        ValueError: If the algorithm is not supported
    """
    func = _DIGESTS.get(algorithm.lower())
    if func is None:
        raise ValueError(
            f"Unsupported hash algorithm: {algorithm}. "
            f"Use one of: {', '.join(SUPPORTED_HASH_ALGORITHMS)}"
        )
    return func


def consistent_name(role: str, digest: bytes) -> str:
    """
    Build the consistent (content-addressed) name for a role.

    Args:
        role: Role name, e.g. "root" or "targets/releases"
        digest: Raw digest of the metadata bytes

    Returns:
        "<role>.<hex digest>", or the role unchanged when digest is empty

    Examples:
        >>> consistent_name("root", bytes.fromhex("abcd"))
        'root.abcd'
        >>> consistent_name("root", b"")
        'root'
    """
    if digest:
        return f"{role}.{digest.hex()}"
    return role


def versioned_name(role: str, version: int) -> str:
    """Build the version-pinned alias for a role, e.g. "1.root"."""
    return f"{version}.{role}"

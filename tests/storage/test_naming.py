"""
Tests for digest and consistent-name helpers.
"""
from __future__ import annotations

import hashlib

import pytest

from tuf_memstore.storage.naming import (
    consistent_name,
    digest_for,
    sha256_digest,
    sha512_digest,
    versioned_name,
)


class TestDigests:

    def test_sha256_is_raw_digest(self) -> None:
        assert sha256_digest(b"abc") == hashlib.sha256(b"abc").digest()
        assert len(sha256_digest(b"abc")) == 32

    def test_sha512_is_raw_digest(self) -> None:
        assert sha512_digest(b"abc") == hashlib.sha512(b"abc").digest()

    @pytest.mark.parametrize("algorithm,expected", [
        ("sha256", sha256_digest),
        ("SHA256", sha256_digest),
        ("sha512", sha512_digest),
    ])
    def test_digest_for(self, algorithm, expected) -> None:
        assert digest_for(algorithm) is expected

    def test_digest_for_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            digest_for("md5")


class TestNames:

    def test_consistent_name_appends_hex(self) -> None:
        digest = hashlib.sha256(b"root bytes").digest()
        assert consistent_name("root", digest) == f"root.{digest.hex()}"

    def test_consistent_name_empty_digest(self) -> None:
        assert consistent_name("timestamp", b"") == "timestamp"

    def test_consistent_name_is_deterministic(self) -> None:
        digest = sha256_digest(b"same")
        assert consistent_name("targets", digest) == consistent_name("targets", sha256_digest(b"same"))

    def test_different_content_different_name(self) -> None:
        assert consistent_name("root", sha256_digest(b"a")) != consistent_name("root", sha256_digest(b"b"))

    def test_versioned_name(self) -> None:
        assert versioned_name("root", 1) == "1.root"
        assert versioned_name("targets/releases", 12) == "12.targets/releases"

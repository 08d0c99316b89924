"""Root pytest configuration for tuf-memstore tests."""
import pytest

from tuf_memstore.settings import Settings
from tuf_memstore.storage.memory import MemoryStore

from .helpers.metadata import signed_metadata


# Keep environment overrides from leaking into tests
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Automatically clear store environment variables."""
    monkeypatch.delenv("TUF_MEMSTORE_MAX_DOWNLOAD_SIZE", raising=False)
    monkeypatch.delenv("TUF_MEMSTORE_HASH_ALGORITHM", raising=False)
    monkeypatch.delenv("TUF_MEMSTORE_LOG_LEVEL", raising=False)


@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings()


@pytest.fixture
def store(settings):
    """Fresh, empty memory store."""
    return MemoryStore(settings=settings)


@pytest.fixture
def root_v1():
    return signed_metadata("root", 1)


@pytest.fixture
def metadata_dir(tmp_path, root_v1):
    """Directory laid out like a published repository."""
    (tmp_path / "root.json").write_bytes(root_v1)
    (tmp_path / "targets.json").write_bytes(signed_metadata("targets", 3))
    (tmp_path / "timestamp.json").write_bytes(signed_metadata("timestamp", 7))
    (tmp_path / "root.pem").write_bytes(b"not metadata")
    return tmp_path

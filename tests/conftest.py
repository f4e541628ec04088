"""Shared fixtures for ProjectStore tests."""

import pytest

from projectstore.core.config import Settings
from projectstore.storage import FileBackend, MemoryBackend


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the file backend at a temporary directory."""
    return Settings(data_dir=tmp_path / "data", log_level="DEBUG")


@pytest.fixture
async def memory_backend():
    """Create an initialized in-memory backend."""
    backend = MemoryBackend()
    await backend.initialize()
    yield backend
    await backend.shutdown()


@pytest.fixture
async def file_backend(settings):
    """Create an initialized file backend."""
    backend = FileBackend(settings)
    await backend.initialize()
    yield backend
    await backend.shutdown()


@pytest.fixture(params=["memory", "file"])
async def storage(request, settings):
    """Each storage backend in turn."""
    if request.param == "memory":
        backend = MemoryBackend()
    else:
        backend = FileBackend(settings)
    await backend.initialize()
    yield backend
    await backend.shutdown()

"""Storage backend selection."""

from ..core.config import Settings, get_settings
from .backend import ProjectStorage
from .file_backend import FileBackend
from .memory_backend import MemoryBackend


def create_storage(settings: Settings | None = None) -> ProjectStorage:
    """Build the backend named by ``settings.backend``."""
    settings = settings or get_settings()
    if settings.backend == "memory":
        return MemoryBackend()
    if settings.backend == "file":
        return FileBackend(settings)
    raise ValueError(f"Unknown storage backend: {settings.backend}")

"""Storage backend implementations."""

from .backend import ProjectStorage, ScanFailure, ScanResult
from .factory import create_storage
from .file_backend import FileBackend, decode_project, encode_project, record_key
from .memory_backend import MemoryBackend

__all__ = [
    "ProjectStorage",
    "ScanFailure",
    "ScanResult",
    "FileBackend",
    "MemoryBackend",
    "create_storage",
    "record_key",
    "encode_project",
    "decode_project",
]

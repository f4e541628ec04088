"""File-based storage backend implementation."""

import asyncio
import re
from pathlib import Path

import aiofiles
import aiofiles.os
import structlog

from ..core.config import Settings, get_settings
from ..errors import (
    CorruptRecordError,
    DuplicateKeyError,
    InvalidInputError,
    NotFoundError,
)
from ..models.project import Project
from .backend import ProjectStorage, ScanFailure, ScanResult

logger = structlog.get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_UNSAFE_KEY_CHARS = ("/", "\\", "\x00")


def record_key(name: str) -> str:
    """
    Derive the storage key for a project name.

    The name is lowercased and every run of whitespace becomes a single
    underscore. Distinct names may map to the same key ("Big Dam" and
    "big  dam"); such names share one storage slot.

    Raises:
        InvalidInputError: If the key would escape the data directory
    """
    key = _WHITESPACE.sub("_", name.lower())
    if not key or key in (".", "..") or any(c in key for c in _UNSAFE_KEY_CHARS):
        raise InvalidInputError(f"Name cannot be used as a file name: {name!r}")
    return key


def encode_project(project: Project) -> str:
    """
    Render a project as the three-line file format.

    The cost is written with six decimals, so finer fractions are rounded.

    Raises:
        InvalidInputError: If the name or area contains a line break
    """
    for field, value in (("Name", project.name), ("Area", project.area)):
        if _LINE_BREAK.search(value):
            raise InvalidInputError(f"{field} cannot contain line breaks: {value!r}")
    return f"{project.name}\n{project.area}\n{project.cost:f}\n"


def decode_project(content: str, source: str = "<memory>") -> Project:
    """
    Parse the three-line file format.

    Lines end at LF, CR or CRLF only. A comma in the cost line is accepted
    as the decimal separator.

    Raises:
        CorruptRecordError: If the content is not a valid project record
    """
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    if len(lines) != 3:
        raise CorruptRecordError(source, f"expected 3 lines, found {len(lines)}")

    name, area, cost_text = lines
    try:
        cost = float(cost_text.strip().replace(",", "."))
    except ValueError:
        raise CorruptRecordError(source, f"invalid cost {cost_text!r}")

    try:
        return Project(name, area, cost)
    except InvalidInputError as e:
        raise CorruptRecordError(source, str(e))


class FileBackend(ProjectStorage):
    """
    Flat-file storage backend: one plaintext file per project.

    Files live in a single directory and are named after the project's
    normalized key. There is no cross-process locking and writes are not
    atomic; the lock below only serializes mutations made through this
    instance.
    """

    name = "file"

    def __init__(
        self,
        settings: Settings | None = None,
        data_dir: Path | str | None = None,
    ):
        self.settings = settings or get_settings()
        self.data_dir = Path(data_dir) if data_dir is not None else self.settings.data_dir
        self.extension = self.settings.file_extension
        self._lock = asyncio.Lock()
        self._initialized = False
        self._stats = {
            "records_written": 0,
            "records_read": 0,
            "records_deleted": 0,
            "scan_failures": 0,
        }

    async def initialize(self) -> None:
        """Create the data directory if needed."""
        if self._initialized:
            return

        await aiofiles.os.makedirs(self.data_dir, exist_ok=True)
        self._initialized = True
        logger.info("File backend initialized", data_dir=str(self.data_dir))

    async def shutdown(self) -> None:
        self._initialized = False

    def _record_path(self, name: str) -> Path:
        """Get the file path for a project name."""
        return self.data_dir / f"{record_key(name)}{self.extension}"

    async def _write(self, path: Path, project: Project) -> None:
        content = encode_project(project)
        async with aiofiles.open(path, "w", encoding="utf-8", newline="\n") as f:
            await f.write(content)
        self._stats["records_written"] += 1

    async def _read(self, path: Path) -> Project:
        try:
            async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
                content = await f.read()
        except UnicodeDecodeError as e:
            raise CorruptRecordError(path.name, f"not valid UTF-8: {e.reason}")
        return decode_project(content, source=path.name)

    async def add(self, project: Project) -> None:
        """Write a new project file."""
        async with self._lock:
            await self.initialize()
            path = self._record_path(project.name)
            if path.exists():
                raise DuplicateKeyError(project.name)
            await self._write(path, project)
            logger.debug("Project added", name=project.name, path=str(path))

    async def get(self, name: str) -> Project | None:
        """Read a project file; None if it does not exist."""
        path = self._record_path(name)
        if not path.exists():
            return None

        project = await self._read(path)
        self._stats["records_read"] += 1
        return project

    async def update(self, project: Project) -> None:
        """Overwrite an existing project file."""
        async with self._lock:
            path = self._record_path(project.name)
            if not path.exists():
                raise NotFoundError(project.name)
            await self._write(path, project)
            logger.debug("Project updated", name=project.name, path=str(path))

    async def delete(self, name: str) -> None:
        """Remove a project file."""
        async with self._lock:
            path = self._record_path(name)
            try:
                await aiofiles.os.remove(path)
            except FileNotFoundError:
                raise NotFoundError(name)
            self._stats["records_deleted"] += 1
            logger.debug("Project deleted", name=name, path=str(path))

    def list_record_files(self) -> list[str]:
        """List the names of all entries in the data directory."""
        if not self.data_dir.exists():
            return []
        return [entry.name for entry in self.data_dir.iterdir()]

    async def scan(self) -> ScanResult:
        """Parse every entry in the data directory, skipping bad ones."""
        result = ScanResult()
        if not self.data_dir.exists():
            return result

        for path in self.data_dir.iterdir():
            try:
                result.projects.append(await self._read(path))
            except CorruptRecordError as e:
                result.failures.append(ScanFailure(source=path.name, reason=e.reason))
            except OSError as e:
                result.failures.append(
                    ScanFailure(source=path.name, reason=e.strerror or str(e))
                )

        self._stats["records_read"] += len(result.projects)
        self._stats["scan_failures"] += len(result.failures)
        return result

    async def get_stats(self) -> dict:
        """Get storage statistics."""
        return {
            **self._stats,
            "backend": self.name,
            "total_records": len(self.list_record_files()),
            "data_dir": str(self.data_dir),
        }

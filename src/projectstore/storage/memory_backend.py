"""In-memory storage backend implementation."""

from ..errors import DuplicateKeyError, NotFoundError
from ..models.project import Project
from .backend import ProjectStorage, ScanResult


class MemoryBackend(ProjectStorage):
    """
    Volatile storage backend keeping projects in a dict keyed by name.

    Contents live as long as the backend instance. Projects are copied on
    the way in and out so callers never share state with the store.
    Iteration follows insertion order; updates keep a project's position.
    """

    name = "memory"

    def __init__(self):
        self._projects: dict[str, Project] = {}
        self._initialized = False
        self._stats = {
            "records_written": 0,
            "records_read": 0,
            "records_deleted": 0,
        }

    async def initialize(self) -> None:
        self._initialized = True

    async def shutdown(self) -> None:
        self._initialized = False

    async def add(self, project: Project) -> None:
        if project.name in self._projects:
            raise DuplicateKeyError(project.name)
        self._projects[project.name] = project.copy()
        self._stats["records_written"] += 1

    async def get(self, name: str) -> Project | None:
        project = self._projects.get(name)
        if project is None:
            return None
        self._stats["records_read"] += 1
        return project.copy()

    async def update(self, project: Project) -> None:
        if project.name not in self._projects:
            raise NotFoundError(project.name)
        self._projects[project.name] = project.copy()
        self._stats["records_written"] += 1

    async def delete(self, name: str) -> None:
        if name not in self._projects:
            raise NotFoundError(name)
        del self._projects[name]
        self._stats["records_deleted"] += 1

    async def scan(self) -> ScanResult:
        return ScanResult(projects=[p.copy() for p in self._projects.values()])

    async def get_stats(self) -> dict:
        return {
            **self._stats,
            "backend": self.name,
            "total_records": len(self._projects),
        }

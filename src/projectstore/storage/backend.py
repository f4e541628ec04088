"""Abstract project storage interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from ..models.project import Project

logger = structlog.get_logger(__name__)


@dataclass
class ScanFailure:
    """An item skipped during enumeration."""

    source: str
    reason: str


@dataclass(eq=False)
class ScanResult(Sequence):
    """
    Projects returned by an enumeration, plus the items that were skipped.

    Behaves as a read-only sequence of projects. ``failures`` lists every
    item that could not be read, so callers can decide whether a partial
    result is acceptable.
    """

    projects: list[Project] = field(default_factory=list)
    failures: list[ScanFailure] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when no item was skipped."""
        return not self.failures

    def filter(self, predicate) -> "ScanResult":
        """Return a new result keeping matching projects and all failures."""
        return ScanResult(
            projects=[p for p in self.projects if predicate(p)],
            failures=list(self.failures),
        )

    def __getitem__(self, index):
        return self.projects[index]

    def __len__(self) -> int:
        return len(self.projects)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScanResult):
            return self.projects == other.projects and self.failures == other.failures
        if isinstance(other, (list, tuple)):
            return self.projects == list(other)
        return NotImplemented


class ProjectStorage(ABC):
    """Abstract base class for project storage backends."""

    name: str = "abstract"

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Shutdown the storage backend."""
        pass

    @abstractmethod
    async def add(self, project: Project) -> None:
        """
        Store a new project.

        Args:
            project: Project to store

        Raises:
            DuplicateKeyError: If a project with the same key exists
        """
        pass

    @abstractmethod
    async def get(self, name: str) -> Project | None:
        """
        Get a project by name.

        Returns:
            The stored project, or None if absent
        """
        pass

    @abstractmethod
    async def update(self, project: Project) -> None:
        """
        Replace the project stored under ``project.name``.

        Raises:
            NotFoundError: If no project is stored under that name
        """
        pass

    @abstractmethod
    async def delete(self, name: str) -> None:
        """
        Delete a project by name.

        Raises:
            NotFoundError: If no project is stored under that name
        """
        pass

    @abstractmethod
    async def scan(self) -> ScanResult:
        """Enumerate every stored project, collecting per-item failures."""
        pass

    @abstractmethod
    async def get_stats(self) -> dict:
        """Get storage statistics."""
        pass

    async def list_all(self) -> ScanResult:
        """List all projects in backend-defined order."""
        result = await self.scan()
        self._log_failures(result, "list_all")
        return result

    async def list_above_cost(self, threshold: float) -> ScanResult:
        """List projects whose cost is strictly greater than ``threshold``."""
        result = await self.scan()
        self._log_failures(result, "list_above_cost")
        return result.filter(lambda p: p.cost > threshold)

    async def count_by_criteria(self, min_cost: float, area: str) -> int:
        """Count projects with ``cost >= min_cost`` in exactly ``area``."""
        result = await self.scan()
        self._log_failures(result, "count_by_criteria")
        return sum(1 for p in result if p.cost >= min_cost and p.area == area)

    def _log_failures(self, result: ScanResult, operation: str) -> None:
        for failure in result.failures:
            logger.warning(
                "Skipped unreadable record",
                backend=self.name,
                operation=operation,
                source=failure.source,
                reason=failure.reason,
            )

"""Exception hierarchy for ProjectStore."""


class ProjectStoreError(Exception):
    """Base class for all ProjectStore errors."""


class InvalidInputError(ProjectStoreError, ValueError):
    """A project field failed validation."""


class StorageError(ProjectStoreError):
    """Base class for storage backend failures."""


class DuplicateKeyError(StorageError):
    """A project with the same key already exists."""

    def __init__(self, key: str):
        super().__init__(f"Project with this name already exists: {key}")
        self.key = key


class NotFoundError(StorageError):
    """No project is stored under the given key."""

    def __init__(self, key: str):
        super().__init__(f"Project does not exist: {key}")
        self.key = key


class CorruptRecordError(StorageError):
    """A persisted record could not be parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Corrupt record {source}: {reason}")
        self.source = source
        self.reason = reason

"""Request dependencies."""

from fastapi import Request

from ..storage.backend import ProjectStorage


def get_storage(request: Request) -> ProjectStorage:
    """Return the storage backend owned by the running app."""
    return request.app.state.storage

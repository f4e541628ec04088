"""API routes."""

from .metrics import router as metrics_router
from .projects import router as projects_router

__all__ = [
    "projects_router",
    "metrics_router",
]

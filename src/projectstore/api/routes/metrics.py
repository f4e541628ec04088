"""Metrics API routes."""

from fastapi import APIRouter, Depends

from ..deps import get_storage
from ...storage.backend import ProjectStorage

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("")
async def get_metrics(storage: ProjectStorage = Depends(get_storage)):
    """Get storage backend metrics."""
    return await storage.get_stats()

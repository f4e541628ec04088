"""Project API routes."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from ..deps import get_storage
from ..schemas.project import (
    ProjectCountResponse,
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
    SkippedRecord,
    SortOrder,
    cost_param,
)
from ...errors import (
    CorruptRecordError,
    DuplicateKeyError,
    InvalidInputError,
    NotFoundError,
)
from ...models.project import Project
from ...storage.backend import ProjectStorage, ScanResult

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


def project_to_response(project: Project) -> ProjectResponse:
    """Convert Project to ProjectResponse."""
    return ProjectResponse(**project.to_dict())


def parse_cost_query(value: str, param: str) -> float:
    """Parse a cost query parameter, accepting ',' as decimal separator."""
    try:
        return cost_param.validate_python(value)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid {param}: {value!r}",
        )


def scan_to_response(result: ScanResult, sort: SortOrder | None) -> ProjectListResponse:
    """Convert a ScanResult to ProjectListResponse."""
    projects = list(result)
    if sort == "cost":
        projects.sort()
    elif sort == "name":
        projects.sort(key=Project.by_name)

    return ProjectListResponse(
        projects=[project_to_response(p) for p in projects],
        total=len(projects),
        skipped=[SkippedRecord(source=f.source, reason=f.reason) for f in result.failures],
    )


def _not_found(name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Project {name} not found",
    )


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def add_project(
    request: ProjectCreate, storage: ProjectStorage = Depends(get_storage)
):
    """Add a new project."""
    try:
        project = Project(request.name, request.area, request.cost)
        await storage.add(project)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateKeyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return project_to_response(project)


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    min_cost: str | None = Query(
        None, description="Only projects costing strictly more than this"
    ),
    sort: SortOrder | None = Query(None, description="Order by cost or name"),
    storage: ProjectStorage = Depends(get_storage),
):
    """List all projects, optionally filtered by cost."""
    if min_cost is None:
        result = await storage.list_all()
    else:
        threshold = parse_cost_query(min_cost, "min_cost")
        result = await storage.list_above_cost(threshold)

    return scan_to_response(result, sort)


@router.get("/count", response_model=ProjectCountResponse)
async def count_projects(
    min_cost: str = Query(..., description="Minimum cost, inclusive"),
    area: str = Query(..., min_length=1, description="Exact area, case-sensitive"),
    storage: ProjectStorage = Depends(get_storage),
):
    """Count projects in an area costing at least ``min_cost``."""
    threshold = parse_cost_query(min_cost, "min_cost")
    count = await storage.count_by_criteria(threshold, area)
    return ProjectCountResponse(min_cost=threshold, area=area, count=count)


@router.get("/{name}", response_model=ProjectResponse)
async def get_project(name: str, storage: ProjectStorage = Depends(get_storage)):
    """Get a specific project by name."""
    try:
        project = await storage.get(name)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CorruptRecordError as e:
        logger.warning("Unreadable project record", name=name, error=str(e))
        project = None

    if project is None:
        raise _not_found(name)

    return project_to_response(project)


@router.put("/{name}", response_model=ProjectResponse)
async def update_project(
    name: str,
    request: ProjectUpdate,
    storage: ProjectStorage = Depends(get_storage),
):
    """Replace a project's area and cost."""
    try:
        project = Project(name, request.area, request.cost)
        await storage.update(project)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise _not_found(name)

    return project_to_response(project)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(name: str, storage: ProjectStorage = Depends(get_storage)):
    """Delete a project."""
    try:
        await storage.delete(name)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise _not_found(name)

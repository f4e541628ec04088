"""Project API schemas."""

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field, TypeAdapter


def _parse_cost(value):
    """Accept numbers, or strings using either '.' or ',' as decimal separator."""
    if isinstance(value, str):
        return value.strip().replace(",", ".")
    return value


CostValue = Annotated[float, BeforeValidator(_parse_cost)]

# Query parameters go through this adapter so they get the same parsing as bodies.
cost_param = TypeAdapter(Annotated[CostValue, Field(allow_inf_nan=False)])


class ProjectCreate(BaseModel):
    """Request to add a project."""

    name: str = Field(..., min_length=1)
    area: str = Field(..., min_length=1)
    cost: CostValue = Field(..., ge=0, allow_inf_nan=False)


class ProjectUpdate(BaseModel):
    """Request to replace a project's area and cost."""

    area: str = Field(..., min_length=1)
    cost: CostValue = Field(..., ge=0, allow_inf_nan=False)


class ProjectResponse(BaseModel):
    """Project response."""

    name: str
    area: str
    cost: float


class SkippedRecord(BaseModel):
    """A stored item that could not be read."""

    source: str
    reason: str


class ProjectListResponse(BaseModel):
    """List of projects response."""

    projects: list[ProjectResponse]
    total: int
    skipped: list[SkippedRecord] = Field(default_factory=list)


class ProjectCountResponse(BaseModel):
    """Count of projects matching criteria."""

    min_cost: float
    area: str
    count: int


SortOrder = Literal["cost", "name"]

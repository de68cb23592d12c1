"""Request/response schemas for projects."""

from datetime import datetime

from pydantic import Field

from tracker.schemas.common import CamelModel, UserSummary
from tracker.schemas.task import TaskResponse


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: str = Field(default="active", min_length=1, max_length=64)


class ProjectUpdate(CamelModel):
    """Partial update: only fields present in the body are changed."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(default=None, min_length=1, max_length=64)


class ProjectResponse(CamelModel):
    id: int
    name: str
    description: str | None
    status: str
    manager_id: int
    manager: UserSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectDetailResponse(ProjectResponse):
    """Single project with its tasks (each with its assigned user)."""

    tasks: list[TaskResponse] = Field(default_factory=list)

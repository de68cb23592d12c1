"""Request/response schemas for tasks."""

from datetime import datetime

from pydantic import Field

from tracker.models.task import Priority
from tracker.schemas.common import CamelModel, UserSummary


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    assigned_user_id: int | None = None
    priority: Priority = Priority.MEDIUM


class TaskUpdate(CamelModel):
    """
    Partial update: only fields present in the body are changed.

    assignedUserId may be sent as null to unassign the task.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(default=None, min_length=1, max_length=64)
    priority: Priority | None = None
    assigned_user_id: int | None = None


class TaskResponse(CamelModel):
    id: int
    title: str
    description: str | None
    project_id: int
    assigned_user_id: int | None
    priority: Priority
    status: str
    assigned_user: UserSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

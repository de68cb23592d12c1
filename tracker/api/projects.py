"""Project endpoints, plus the task collection nested under a project."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tracker.api.deps import require
from tracker.core.database import get_db
from tracker.core.permissions import Operation
from tracker.schemas.auth import CurrentUser
from tracker.schemas.common import MessageResponse
from tracker.schemas.project import (
    ProjectCreate,
    ProjectDetailResponse,
    ProjectResponse,
    ProjectUpdate,
)
from tracker.schemas.task import TaskCreate, TaskResponse
from tracker.services import projects, tasks

router = APIRouter()


@router.get("", response_model=list[ProjectResponse])
def list_projects(
    _user: Annotated[CurrentUser, Depends(require(Operation.LIST_PROJECTS))],
    db: Annotated[Session, Depends(get_db)],
) -> list[ProjectResponse]:
    return [ProjectResponse.model_validate(p) for p in projects.list_projects(db)]


@router.get("/{project_id}", response_model=ProjectDetailResponse)
def get_project(
    project_id: int,
    _user: Annotated[CurrentUser, Depends(require(Operation.READ_PROJECT))],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectDetailResponse:
    """Project with its manager and tasks (each with its assigned user)."""
    project = projects.get_project(db, project_id, with_tasks=True)
    return ProjectDetailResponse.model_validate(project)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    current_user: Annotated[CurrentUser, Depends(require(Operation.CREATE_PROJECT))],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectResponse:
    """Create a project managed by the caller."""
    project = projects.create_project(
        db,
        manager_id=current_user.id,
        name=body.name,
        description=body.description,
        status=body.status,
    )
    return ProjectResponse.model_validate(project)


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    body: ProjectUpdate,
    _user: Annotated[CurrentUser, Depends(require(Operation.UPDATE_PROJECT))],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectResponse:
    """Partial update; fields missing from the body keep their values."""
    project = projects.update_project(db, project_id, body.model_dump(exclude_unset=True))
    return ProjectResponse.model_validate(project)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: int,
    _admin: Annotated[CurrentUser, Depends(require(Operation.DELETE_PROJECT))],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a project and its tasks (admin only)."""
    projects.delete_project(db, project_id)
    return MessageResponse(message="Project deleted successfully")


@router.get("/{project_id}/tasks", response_model=list[TaskResponse])
def list_project_tasks(
    project_id: int,
    _user: Annotated[CurrentUser, Depends(require(Operation.LIST_TASKS))],
    db: Annotated[Session, Depends(get_db)],
) -> list[TaskResponse]:
    return [TaskResponse.model_validate(t) for t in tasks.list_tasks(db, project_id)]


@router.post(
    "/{project_id}/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_project_task(
    project_id: int,
    body: TaskCreate,
    _user: Annotated[CurrentUser, Depends(require(Operation.CREATE_TASK))],
    db: Annotated[Session, Depends(get_db)],
) -> TaskResponse:
    """Create a pending task under the project. 404 if the project or assignee does not exist."""
    task = tasks.create_task(
        db,
        project_id=project_id,
        title=body.title,
        description=body.description,
        assigned_user_id=body.assigned_user_id,
        priority=body.priority,
    )
    return TaskResponse.model_validate(task)

"""Task endpoints addressed by task id."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tracker.api.deps import require
from tracker.core.database import get_db
from tracker.core.permissions import Operation
from tracker.schemas.auth import CurrentUser
from tracker.schemas.common import MessageResponse
from tracker.schemas.task import TaskResponse, TaskUpdate
from tracker.services import tasks

router = APIRouter()


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    body: TaskUpdate,
    _user: Annotated[CurrentUser, Depends(require(Operation.UPDATE_TASK))],
    db: Annotated[Session, Depends(get_db)],
) -> TaskResponse:
    """Partial update open to any authenticated user; unsent fields are untouched."""
    task = tasks.update_task(db, task_id, body.model_dump(exclude_unset=True))
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    _user: Annotated[CurrentUser, Depends(require(Operation.DELETE_TASK))],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    tasks.delete_task(db, task_id)
    return MessageResponse(message="Task deleted successfully")

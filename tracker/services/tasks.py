"""Task CRUD over the resource graph, with foreign key checks on project and assignee."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.core.errors import InvalidReferenceError, NotFoundError
from tracker.models import Priority, Project, Task, User

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"title", "status", "priority"})
_UPDATABLE_FIELDS = frozenset({"title", "description", "status", "priority", "assigned_user_id"})


def _ensure_project_exists(db: Session, project_id: int) -> None:
    if db.get(Project, project_id) is None:
        raise InvalidReferenceError("Project not found")


def _ensure_user_exists(db: Session, user_id: int | None) -> None:
    if user_id is not None and db.get(User, user_id) is None:
        raise InvalidReferenceError("Assigned user not found")


def _commit_referencing(db: Session) -> None:
    """Commit; a foreign key violation from a concurrent delete becomes InvalidReferenceError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise InvalidReferenceError("Referenced project or user no longer exists") from e


def create_task(
    db: Session,
    project_id: int,
    title: str,
    description: str | None = None,
    assigned_user_id: int | None = None,
    priority: Priority = Priority.MEDIUM,
) -> Task:
    """Create a pending task under project_id. Raises InvalidReferenceError for a missing project or assignee."""
    _ensure_project_exists(db, project_id)
    _ensure_user_exists(db, assigned_user_id)
    task = Task(
        title=title,
        description=description,
        project_id=project_id,
        assigned_user_id=assigned_user_id,
        priority=Priority(priority).value,
        status="pending",
    )
    db.add(task)
    _commit_referencing(db)
    db.refresh(task)
    logger.info("Created task id=%s project_id=%s", task.id, project_id)
    return task


def list_tasks(db: Session, project_id: int) -> list[Task]:
    """Tasks of a project, assignee joined. Raises NotFoundError if the project does not exist."""
    if db.get(Project, project_id) is None:
        raise NotFoundError("Project not found")
    return db.query(Task).filter(Task.project_id == project_id).order_by(Task.id).all()


def get_task(db: Session, task_id: int) -> Task:
    task = db.get(Task, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


def update_task(db: Session, task_id: int, changes: dict[str, Any]) -> Task:
    """
    Apply a partial update. Only keys present in changes are written; a None for
    a required column is treated as absent, a None assigned_user_id unassigns.
    """
    task = get_task(db, task_id)
    updates = {
        field: value
        for field, value in changes.items()
        if field in _UPDATABLE_FIELDS and not (value is None and field in _REQUIRED_FIELDS)
    }
    # Validate everything before touching the task so a rejected update leaves no pending changes.
    if "assigned_user_id" in updates:
        _ensure_user_exists(db, updates["assigned_user_id"])
    if "priority" in updates:
        updates["priority"] = Priority(updates["priority"]).value
    for field, value in updates.items():
        setattr(task, field, value)
    _commit_referencing(db)
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int) -> None:
    task = get_task(db, task_id)
    db.delete(task)
    db.commit()
    logger.info("Deleted task id=%s", task_id)

"""Project CRUD over the resource graph."""

import logging
from typing import Any

from sqlalchemy.orm import Session, selectinload

from tracker.core.errors import NotFoundError
from tracker.models import Project, Task

logger = logging.getLogger(__name__)

# Columns that must never be written as NULL through a partial update.
_REQUIRED_FIELDS = frozenset({"name", "status"})
_UPDATABLE_FIELDS = frozenset({"name", "description", "status"})


def create_project(
    db: Session,
    manager_id: int,
    name: str,
    description: str | None = None,
    status: str = "active",
) -> Project:
    """Create a project managed by manager_id (the creating identity)."""
    project = Project(
        name=name,
        description=description,
        status=status,
        manager_id=manager_id,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Created project id=%s manager_id=%s", project.id, manager_id)
    return project


def list_projects(db: Session) -> list[Project]:
    """All projects, manager joined."""
    return db.query(Project).order_by(Project.id).all()


def get_project(db: Session, project_id: int, with_tasks: bool = False) -> Project:
    """Return the project or raise NotFoundError. with_tasks eagerly loads tasks and assignees."""
    query = db.query(Project).filter(Project.id == project_id)
    if with_tasks:
        query = query.options(selectinload(Project.tasks).joinedload(Task.assigned_user))
    project = query.first()
    if project is None:
        raise NotFoundError("Project not found")
    return project


def update_project(db: Session, project_id: int, changes: dict[str, Any]) -> Project:
    """
    Apply a partial update. Only keys present in changes are written; a None for
    a required column is treated as absent. Last writer wins.
    """
    project = get_project(db, project_id)
    for field, value in changes.items():
        if field not in _UPDATABLE_FIELDS:
            continue
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(project, field, value)
    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: int) -> int:
    """Delete the project and its tasks. Returns the number of tasks removed with it."""
    project = get_project(db, project_id)
    task_count = db.query(Task).filter(Task.project_id == project_id).count()
    db.delete(project)
    db.commit()
    logger.info("Deleted project id=%s with %s task(s)", project_id, task_count)
    return task_count

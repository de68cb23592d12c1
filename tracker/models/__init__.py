"""SQLAlchemy ORM models."""

from tracker.models.base import Base
from tracker.models.project import Project
from tracker.models.task import Priority, Task
from tracker.models.user import User

__all__ = ["Base", "Priority", "Project", "Task", "User"]

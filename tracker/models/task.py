"""ORM model for tasks under a project, optionally assigned to a user."""

from enum import Enum

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tracker.models.base import Base, TimestampMixin


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(TimestampMixin, Base):
    """A task. project_id is required; assigned_user_id is nulled if the user row goes away."""

    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint("priority IN ('low', 'medium', 'high')", name="ck_tasks_priority"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    assigned_user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    priority = Column(String(16), nullable=False, default=Priority.MEDIUM.value)
    status = Column(String(64), nullable=False, default="pending")

    project = relationship("Project", back_populates="tasks")
    assigned_user = relationship("User", lazy="joined")

"""ORM model for projects owned by a managing user."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tracker.models.base import Base, TimestampMixin


class Project(TimestampMixin, Base):
    """
    A project. manager_id is the user who created it.

    Deleting a project deletes its tasks (ORM cascade, mirrored by ON DELETE CASCADE).
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(64), nullable=False, default="active")
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    manager = relationship("User", lazy="joined")
    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Task.id",
    )

"""SQLAlchemy declarative Base and columns shared by the project/task tables."""

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class TimestampMixin:
    """created_at set by the database on insert; updated_at refreshed on every ORM update."""

    # Plain Columns on a mixin are copied onto each mapped subclass.
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, Integer, String

from tracker.core.permissions import Role
from tracker.models.base import Base


class User(Base):
    """
    User account for authentication and role-based access control.

    role: 'employee', 'manager' or 'admin' (stored as the enum value).
    email is unique as stored (case-sensitive); the unique index is what makes
    concurrent registrations with the same email fail.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.EMPLOYEE.value)

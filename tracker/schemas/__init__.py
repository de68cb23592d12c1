"""Pydantic request/response schemas."""

from tracker.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfile,
)
from tracker.schemas.common import MessageResponse, UserSummary
from tracker.schemas.health import HealthResponse
from tracker.schemas.project import (
    ProjectCreate,
    ProjectDetailResponse,
    ProjectResponse,
    ProjectUpdate,
)
from tracker.schemas.task import TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProjectCreate",
    "ProjectDetailResponse",
    "ProjectResponse",
    "ProjectUpdate",
    "RegisterRequest",
    "RegisterResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "UserProfile",
    "UserSummary",
]

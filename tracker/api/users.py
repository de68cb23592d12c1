"""User endpoints: own profile and the admin-only user list."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tracker.api.deps import require
from tracker.core.database import get_db
from tracker.core.errors import NotFoundError
from tracker.core.permissions import Operation
from tracker.schemas.auth import CurrentUser, UserProfile
from tracker.services import credentials

router = APIRouter()


@router.get("/profile", response_model=UserProfile)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(require(Operation.READ_OWN_PROFILE))],
    db: Annotated[Session, Depends(get_db)],
) -> UserProfile:
    """Return the caller's stored profile."""
    user = credentials.get_user(db, current_user.id)
    if user is None:
        raise NotFoundError("User not found")
    return UserProfile.model_validate(user)


@router.get("", response_model=list[UserProfile])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require(Operation.LIST_USERS))],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserProfile]:
    """List all users (admin only)."""
    return [UserProfile.model_validate(u) for u in credentials.list_users(db)]

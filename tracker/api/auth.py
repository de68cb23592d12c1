"""Registration, login and logout. Works unchanged with either authenticator."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from tracker.api.deps import get_authenticator, require, security
from tracker.core.database import get_db
from tracker.core.permissions import Operation
from tracker.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfile,
)
from tracker.schemas.common import MessageResponse
from tracker.services import credentials
from tracker.services.authenticator import Authenticator

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an account. Returns 409 if the email is already registered."""
    user = credentials.register(db, body.name, body.email, body.password, body.role)
    return RegisterResponse(user=UserProfile.model_validate(user))


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> LoginResponse:
    """
    Authenticate with email and password.

    Session strategy: the session reference is set as a cookie.
    Token strategy: the signed token is returned in the body; send it back as
    Authorization: Bearer <token>.
    """
    user = credentials.verify(db, body.email, body.password)
    profile = UserProfile.model_validate(user)
    credential = authenticator.issue(CurrentUser.model_validate(user))
    token = authenticator.deliver(response, credential)
    logger.info("User id=%s logged in (%s)", user.id, authenticator.strategy)
    return LoginResponse(
        user=profile,
        token=token,
        token_type="bearer" if token else None,
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    current_user: Annotated[CurrentUser, Depends(require(Operation.LOGOUT))],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    bearer: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> MessageResponse:
    """End the session. With the token strategy this is a no-op: the token lives until it expires."""
    authenticator.invalidate(authenticator.read_credential(request, bearer))
    authenticator.clear(response)
    logger.info("User id=%s logged out (%s)", current_user.id, authenticator.strategy)
    return MessageResponse(message="Logout successful")

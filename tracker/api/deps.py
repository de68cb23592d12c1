"""Auth dependencies: resolve the caller's identity, then check it against the guard policy."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tracker.core.permissions import Operation, check
from tracker.schemas.auth import CurrentUser
from tracker.services.authenticator import Authenticator

# auto_error=False: a missing header is reported by the authenticator, and the session strategy ignores it.
security = HTTPBearer(auto_error=False)


def get_authenticator(request: Request) -> Authenticator:
    """The authenticator built once by the app factory."""
    return request.app.state.authenticator


def get_current_user(
    request: Request,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    bearer: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Dependency: require a valid session or bearer token. Raises 401 if missing or invalid."""
    return authenticator.resolve(authenticator.read_credential(request, bearer))


def require(operation: Operation) -> Callable[..., CurrentUser]:
    """
    Dependency factory: authenticate, then enforce the minimum role for operation.

    Authentication always runs first, so an anonymous caller gets 401, never 403.
    """

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        check(current_user.role, operation)
        return current_user

    dependency.__name__ = f"require_{operation.value}"
    return dependency

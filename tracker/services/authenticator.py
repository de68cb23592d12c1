"""
Authenticators: turn a verified user into an identity assertion and back.

Two interchangeable variants share one interface so routes never branch on the
configured strategy:

- SessionAuthenticator keeps {id, name, email, role} in a SessionStore and hands
  the caller an opaque reference in an HttpOnly cookie. Logout removes the record.
- TokenAuthenticator signs the same claims into a JWT returned in the response
  body and read back from the Authorization: Bearer header. No server-side state;
  logout does nothing and the token stays valid until it expires.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import jwt
from fastapi import Request, Response
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import ValidationError

from tracker.core.config import Settings
from tracker.core.errors import InvalidOrExpiredTokenError, UnauthenticatedError
from tracker.core.security import create_access_token, decode_access_token
from tracker.schemas.auth import CurrentUser
from tracker.services.session_store import SessionStore

logger = logging.getLogger(__name__)

def _identity_claims(identity: CurrentUser) -> dict[str, Any]:
    return {
        "id": identity.id,
        "name": identity.name,
        "email": identity.email,
        "role": identity.role.value,
    }


class Authenticator(ABC):
    """Issue, resolve and invalidate identity assertions, plus how they travel over HTTP."""

    strategy: str

    @abstractmethod
    def issue(self, identity: CurrentUser) -> str:
        """Create an assertion for identity and return it."""

    @abstractmethod
    def resolve(self, credential: str | None) -> CurrentUser:
        """Return the identity behind credential. Raises UnauthenticatedError."""

    @abstractmethod
    def invalidate(self, credential: str | None) -> None:
        """End the assertion early where the strategy supports it."""

    @abstractmethod
    def read_credential(
        self,
        request: Request,
        bearer: HTTPAuthorizationCredentials | None = None,
    ) -> str | None:
        """
        Extract the presented assertion from an inbound request, if any.

        bearer is what the HTTPBearer scheme parsed from the Authorization header.
        """

    def deliver(self, response: Response, credential: str) -> str | None:
        """
        Attach credential to the login response.

        Returns the value to place in the response body, or None when the
        transport carries it on its own (cookies).
        """
        return credential

    def clear(self, response: Response) -> None:
        """Undo deliver() on the logout response."""


class SessionAuthenticator(Authenticator):
    """Server-held sessions keyed by an opaque cookie value."""

    strategy = "session"

    def __init__(
        self,
        store: SessionStore,
        ttl_seconds: float,
        cookie_name: str,
        cookie_secure: bool = False,
    ) -> None:
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.cookie_name = cookie_name
        self.cookie_secure = cookie_secure

    def issue(self, identity: CurrentUser) -> str:
        # Logins bound the table: sessions never looked up again are dropped here.
        purged = self.store.purge_expired()
        if purged:
            logger.info("Purged %d expired sessions", purged)
        return self.store.create(_identity_claims(identity), self.ttl_seconds)

    def resolve(self, credential: str | None) -> CurrentUser:
        if not credential:
            raise UnauthenticatedError()
        data = self.store.get(credential)
        if data is None:
            raise UnauthenticatedError("Session expired or invalid")
        return CurrentUser.model_validate(data)

    def invalidate(self, credential: str | None) -> None:
        if credential and self.store.delete(credential):
            logger.info("Session invalidated")

    def read_credential(
        self,
        request: Request,
        bearer: HTTPAuthorizationCredentials | None = None,
    ) -> str | None:
        return request.cookies.get(self.cookie_name)

    def deliver(self, response: Response, credential: str) -> str | None:
        response.set_cookie(
            key=self.cookie_name,
            value=credential,
            max_age=int(self.ttl_seconds),
            httponly=True,
            secure=self.cookie_secure,
            samesite="lax",
        )
        return None

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            key=self.cookie_name,
            httponly=True,
            secure=self.cookie_secure,
            samesite="lax",
        )


class TokenAuthenticator(Authenticator):
    """Stateless HMAC-signed JWTs carrying the identity claims."""

    strategy = "token"

    def __init__(self, secret: str, algorithm: str, expire_minutes: int) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, identity: CurrentUser) -> str:
        return create_access_token(
            identity.id,
            _identity_claims(identity),
            secret=self.secret,
            algorithm=self.algorithm,
            expire_minutes=self.expire_minutes,
        )

    def resolve(self, credential: str | None) -> CurrentUser:
        if not credential:
            raise UnauthenticatedError()
        try:
            payload = decode_access_token(
                credential, secret=self.secret, algorithm=self.algorithm
            )
        except jwt.PyJWTError as e:
            raise InvalidOrExpiredTokenError() from e
        try:
            identity = CurrentUser.model_validate(payload)
        except ValidationError as e:
            raise InvalidOrExpiredTokenError("Invalid token payload") from e
        if str(identity.id) != payload.get("sub"):
            raise InvalidOrExpiredTokenError("Invalid token payload")
        return identity

    def invalidate(self, credential: str | None) -> None:
        # Nothing to revoke: the token remains valid until its exp claim.
        return None

    def read_credential(
        self,
        request: Request,
        bearer: HTTPAuthorizationCredentials | None = None,
    ) -> str | None:
        return bearer.credentials if bearer else None


def build_authenticator(settings: Settings, store: SessionStore | None = None) -> Authenticator:
    """Construct the authenticator selected by AUTH_STRATEGY."""
    if settings.AUTH_STRATEGY == "token":
        return TokenAuthenticator(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )
    return SessionAuthenticator(
        store=store if store is not None else SessionStore(),
        ttl_seconds=settings.SESSION_TTL_HOURS * 3600,
        cookie_name=settings.SESSION_COOKIE_NAME,
        cookie_secure=settings.SESSION_COOKIE_SECURE,
    )

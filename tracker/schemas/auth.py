"""Request/response schemas for registration, login and user endpoints."""

from pydantic import Field, field_validator

from tracker.core.permissions import Role
from tracker.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from tracker.schemas.common import CamelModel


def _normalize_email(value: str) -> str:
    return value.strip()


def _validate_email(value: str) -> str:
    value = _normalize_email(value)
    local, sep, domain = value.partition("@")
    if not sep or not local or "." not in domain or " " in value:
        raise ValueError("email must be a valid address (e.g. alice@example.com)")
    return value


class RegisterRequest(CamelModel):
    """New account. role defaults to employee; any value outside the hierarchy is rejected."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: str = Field(..., min_length=3, max_length=EMAIL_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role = Role.EMPLOYEE

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must be non-empty")
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class LoginRequest(CamelModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        # Same normalization as registration; no shape check so failures stay uniform.
        return _normalize_email(v)


class CurrentUser(CamelModel):
    """Resolved identity carried by a session or token: id, name, email, role."""

    id: int
    name: str
    email: str
    role: Role


class UserProfile(CamelModel):
    """User entry returned by profile and admin list (no password)."""

    id: int
    name: str
    email: str
    role: Role


class RegisterResponse(CamelModel):
    message: str = "User registered"
    user: UserProfile


class LoginResponse(CamelModel):
    """Login result. token/token_type are only present for the token strategy."""

    message: str = "Login successful"
    user: UserProfile
    token: str | None = Field(default=None, description="Signed bearer token")
    token_type: str | None = Field(default=None, description="Token type")

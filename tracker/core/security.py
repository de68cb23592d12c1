"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from tracker.core.config import settings

# Min/max lengths for name, email and password validation.
NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash compared against when the email is unknown, so both login failures cost the same."""
    return hash_password("not-a-real-password")


def create_access_token(
    sub: str | int,
    claims: dict[str, Any],
    *,
    secret: str,
    algorithm: str,
    expire_minutes: int,
) -> str:
    """Create a JWT with sub, the given extra claims, exp and iat."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=expire_minutes)
    payload: dict[str, Any] = {
        **claims,
        "sub": str(sub),
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload.
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        secret,
        algorithms=[algorithm],
        options={"require": ["sub", "exp"]},
    )

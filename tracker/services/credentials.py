"""Credential store: registration and password verification over the users table."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.core.errors import DuplicateEmailError, InvalidCredentialsError
from tracker.core.permissions import Role
from tracker.core.security import dummy_password_hash, hash_password, verify_password
from tracker.models.user import User

logger = logging.getLogger(__name__)


def register(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: Role = Role.EMPLOYEE,
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Email uniqueness is left to the unique index: a concurrent registration with
    the same email loses at commit time and surfaces as DuplicateEmailError.
    """
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=Role(role).value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError() from e
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def verify(db: Session, email: str, password: str) -> User:
    """
    Return the user whose email and password match.

    Unknown email and wrong password raise the same InvalidCredentialsError, and
    both paths run one bcrypt comparison.
    """
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        verify_password(password, dummy_password_hash())
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()

"""Typed failures raised by the credential store, authenticators, guard and resource graph.

Every error carries a stable machine-readable code and the HTTP status the API
layer answers with. Messages are safe to show to callers; storage details never
end up in them.
"""


class TrackerError(Exception):
    """Base class for all expected (non-internal) failures."""

    code = "ERROR"
    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateEmailError(TrackerError):
    """Registration with an email that already belongs to a user."""

    code = "DUPLICATE_EMAIL"
    status_code = 409

    def __init__(self, message: str = "User with this email already exists") -> None:
        super().__init__(message)


class InvalidCredentialsError(TrackerError):
    """Login failed. Deliberately silent about whether the email or the password was wrong."""

    code = "INVALID_CREDENTIALS"
    status_code = 401

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class UnauthenticatedError(TrackerError):
    """Missing, malformed, unknown or expired identity assertion."""

    code = "UNAUTHENTICATED"
    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidOrExpiredTokenError(UnauthenticatedError):
    """Signed token failed signature or expiry verification."""

    code = "INVALID_OR_EXPIRED_TOKEN"

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class ForbiddenError(TrackerError):
    """Authenticated, but the role is below what the operation requires."""

    code = "FORBIDDEN"
    status_code = 403

    def __init__(self, message: str = "Insufficient role for this operation") -> None:
        super().__init__(message)


class NotFoundError(TrackerError):
    code = "NOT_FOUND"
    status_code = 404


class InvalidReferenceError(TrackerError):
    """A foreign key points at a row that does not exist."""

    code = "INVALID_REFERENCE"
    status_code = 404

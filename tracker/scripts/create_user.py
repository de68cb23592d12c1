"""
Create a user (e.g. the first admin). Run from project root:
  python -m tracker.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m tracker.scripts.create_user "Ada Admin" ada@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from tracker.core.database import SessionLocal
from tracker.core.errors import DuplicateEmailError
from tracker.core.permissions import Role
from tracker.schemas.auth import RegisterRequest
from tracker.services import credentials

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a tracker user from the command line.")
    parser.add_argument("name", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Login email (unique)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.EMPLOYEE.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    try:
        request = RegisterRequest(
            name=args.name, email=args.email, password=args.password, role=args.role
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = credentials.register(
            db, request.name, request.email, request.password, request.role
        )
    except DuplicateEmailError:
        print(f"User '{request.email}' already exists.", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Failed to create user")
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Role hierarchy and the per-operation policy table enforced by the authorization guard."""

import logging
from enum import Enum

from tracker.core.errors import ForbiddenError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Closed set of roles, totally ordered employee < manager < admin."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def at_least(self, other: "Role") -> bool:
        return self.rank >= other.rank


_ROLE_RANK: dict[Role, int] = {Role.EMPLOYEE: 0, Role.MANAGER: 1, Role.ADMIN: 2}


class Operation(str, Enum):
    """Operation categories the guard knows about."""

    READ_OWN_PROFILE = "read_own_profile"
    LIST_USERS = "list_users"
    LIST_PROJECTS = "list_projects"
    READ_PROJECT = "read_project"
    CREATE_PROJECT = "create_project"
    UPDATE_PROJECT = "update_project"
    DELETE_PROJECT = "delete_project"
    LIST_TASKS = "list_tasks"
    CREATE_TASK = "create_task"
    UPDATE_TASK = "update_task"
    DELETE_TASK = "delete_task"
    LOGOUT = "logout"


# Minimum role per operation. Delete project is admin-only and update task is open
# to every authenticated identity; both are settled here, not per route.
POLICY: dict[Operation, Role] = {
    Operation.READ_OWN_PROFILE: Role.EMPLOYEE,
    Operation.LIST_PROJECTS: Role.EMPLOYEE,
    Operation.READ_PROJECT: Role.EMPLOYEE,
    Operation.LIST_TASKS: Role.EMPLOYEE,
    Operation.UPDATE_TASK: Role.EMPLOYEE,
    Operation.LOGOUT: Role.EMPLOYEE,
    Operation.CREATE_PROJECT: Role.MANAGER,
    Operation.UPDATE_PROJECT: Role.MANAGER,
    Operation.CREATE_TASK: Role.MANAGER,
    Operation.DELETE_TASK: Role.MANAGER,
    Operation.DELETE_PROJECT: Role.ADMIN,
    Operation.LIST_USERS: Role.ADMIN,
}


def is_allowed(role: Role | str, operation: Operation) -> bool:
    """True if role meets the minimum role for operation. Unknown roles are never allowed."""
    try:
        role = Role(role)
    except ValueError:
        return False
    return role.at_least(POLICY[operation])


def check(role: Role | str, operation: Operation) -> None:
    """Raise ForbiddenError unless role may perform operation."""
    if not is_allowed(role, operation):
        logger.warning(
            "Guard denied operation=%s role=%s (requires %s)",
            operation.value,
            getattr(role, "value", role),
            POLICY[operation].value,
        )
        raise ForbiddenError(f"{POLICY[operation].value.capitalize()} role required")

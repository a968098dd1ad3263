"""
Role-based access control.

The policy is a plain table from action to the roles allowed to perform it.
``is_allowed`` is a pure lookup; ``PermissionChecker`` wraps it as a FastAPI
dependency that authenticates the caller, logs denials and raises 403.
"""

from enum import Enum
from typing import Annotated

from fastapi import Depends, Request

from eventdesk.auth.middleware import CurrentUser, get_current_user
from eventdesk.auth.models import UserRole
from eventdesk.shared.exceptions import ForbiddenError
from eventdesk.shared.logging import get_logger

logger = get_logger(__name__)


class Action(str, Enum):
    """Operations subject to authorization."""

    READ_EVENTS = "read_events"
    READ_DASHBOARD = "read_dashboard"
    CREATE_EVENT = "create_event"
    UPDATE_EVENT = "update_event"
    DELETE_EVENT = "delete_event"

    READ_GUESTS = "read_guests"
    MANAGE_GUESTS = "manage_guests"

    READ_TASKS = "read_tasks"
    MANAGE_TASKS = "manage_tasks"


_ALL_ROLES = frozenset(UserRole)
_EDITORS = frozenset({UserRole.ADMIN, UserRole.MANAGER})

POLICY: dict[Action, frozenset[UserRole]] = {
    Action.READ_EVENTS: _ALL_ROLES,
    Action.READ_DASHBOARD: _ALL_ROLES,
    Action.CREATE_EVENT: _EDITORS,
    Action.UPDATE_EVENT: _EDITORS,
    Action.DELETE_EVENT: _EDITORS,
    Action.READ_GUESTS: _ALL_ROLES,
    Action.MANAGE_GUESTS: _EDITORS,
    Action.READ_TASKS: _ALL_ROLES,
    Action.MANAGE_TASKS: _EDITORS,
}


def is_allowed(role: UserRole | str, action: Action) -> bool:
    """Return whether ``role`` may perform ``action``.

    Unknown roles and actions are denied.
    """
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return role in POLICY.get(action, frozenset())


def authorize(user: CurrentUser, action: Action) -> None:
    """Raise ``ForbiddenError`` unless the user's role permits ``action``."""
    if not is_allowed(user.role, action):
        raise ForbiddenError(
            details={"action": action.value, "current_role": user.role.value},
        )


class PermissionChecker:
    """Dependency class enforcing one action of the policy table."""

    def __init__(self, action: Action) -> None:
        self.action = action

    async def __call__(
        self,
        request: Request,
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        """Return the current user if authorized.

        Raises:
            ForbiddenError: If the user's role lacks the permission.
        """
        if not is_allowed(current_user.role, self.action):
            logger.warning(
                "Access denied",
                extra={
                    "user_id": str(current_user.id),
                    "user_role": current_user.role.value,
                    "action": self.action.value,
                    "endpoint": request.url.path,
                    "method": request.method,
                    "client_ip": request.client.host if request.client else "unknown",
                },
            )
        authorize(current_user, self.action)
        return current_user


def require_permission(action: Action) -> PermissionChecker:
    """Create a permission checker for ``action``.

    Example:
        @router.post("")
        async def create(user: CurrentUser = Depends(require_permission(Action.CREATE_EVENT))):
            ...
    """
    return PermissionChecker(action)


can_read_events = require_permission(Action.READ_EVENTS)
can_read_dashboard = require_permission(Action.READ_DASHBOARD)
can_create_event = require_permission(Action.CREATE_EVENT)
can_update_event = require_permission(Action.UPDATE_EVENT)
can_delete_event = require_permission(Action.DELETE_EVENT)
can_read_guests = require_permission(Action.READ_GUESTS)
can_manage_guests = require_permission(Action.MANAGE_GUESTS)
can_read_tasks = require_permission(Action.READ_TASKS)
can_manage_tasks = require_permission(Action.MANAGE_TASKS)

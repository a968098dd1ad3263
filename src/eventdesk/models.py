"""
Import every ORM model so ``Base.metadata`` knows all tables.
"""

from eventdesk.auth.models import User, UserRole
from eventdesk.events.models import Event, EventStatus
from eventdesk.guests.models import Guest, RsvpStatus
from eventdesk.tasks.models import Task, TaskStatus

__all__ = [
    "Event",
    "EventStatus",
    "Guest",
    "RsvpStatus",
    "Task",
    "TaskStatus",
    "User",
    "UserRole",
]

"""
Task service.
"""

from typing import Sequence
from uuid import UUID

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import Action, authorize
from eventdesk.events.models import Event
from eventdesk.events.repository import EventRepositoryProtocol
from eventdesk.shared.exceptions import NotFoundError
from eventdesk.shared.logging import get_logger
from eventdesk.tasks.models import Task, TaskStatus
from eventdesk.tasks.repository import TaskRepository
from eventdesk.tasks.schemas import TaskCreate, TaskUpdate

logger = get_logger(__name__)


class TaskService:
    """Service for task business logic.

    Event-scoped calls resolve the parent event among the caller's own events
    first, so a foreign event's tasks are reported as not found.
    """

    def __init__(
        self,
        repository: TaskRepository,
        event_repository: EventRepositoryProtocol,
    ) -> None:
        self._repository = repository
        self._event_repository = event_repository

    async def _owned_event(self, event_id: UUID, user: CurrentUser) -> Event:
        event = await self._event_repository.get(user.id, event_id)
        if event is None:
            raise NotFoundError(
                message=f"Event with ID {event_id} not found",
                code="EVENT_NOT_FOUND",
                details={"event_id": str(event_id)},
            )
        return event

    async def list_tasks(
        self,
        event_id: UUID,
        user: CurrentUser,
        page: int = 1,
        page_size: int = 50,
        status: TaskStatus | None = None,
    ) -> tuple[Sequence[Task], int]:
        authorize(user, Action.READ_TASKS)
        await self._owned_event(event_id, user)
        return await self._repository.list_by_event(
            event_id,
            page=page,
            page_size=page_size,
            status=status,
        )

    async def list_my_tasks(
        self,
        user: CurrentUser,
        page: int = 1,
        page_size: int = 50,
        status: TaskStatus | None = None,
    ) -> tuple[Sequence[Task], int]:
        """List the tasks the caller created, across all of their events."""
        authorize(user, Action.READ_TASKS)
        return await self._repository.list_by_owner(
            user.id,
            page=page,
            page_size=page_size,
            status=status,
        )

    async def get_task(self, event_id: UUID, task_id: UUID, user: CurrentUser) -> Task:
        authorize(user, Action.READ_TASKS)
        await self._owned_event(event_id, user)

        task = await self._repository.get(event_id, task_id)
        if task is None:
            raise NotFoundError(
                message=f"Task with ID {task_id} not found",
                code="TASK_NOT_FOUND",
                details={"event_id": str(event_id), "task_id": str(task_id)},
            )
        return task

    async def add_task(self, event_id: UUID, data: TaskCreate, user: CurrentUser) -> Task:
        """Create a task on one of the caller's events; the caller owns it."""
        authorize(user, Action.MANAGE_TASKS)
        event = await self._owned_event(event_id, user)

        task = Task(**data.model_dump(), user_id=user.id)
        event.tasks.append(task)
        task = await self._repository.create(task)
        logger.info(
            "Task added",
            extra={"event_id": str(event_id), "task_id": str(task.id), "user_id": str(user.id)},
        )
        return task

    async def update_task(
        self,
        event_id: UUID,
        task_id: UUID,
        data: TaskUpdate,
        user: CurrentUser,
    ) -> Task:
        authorize(user, Action.MANAGE_TASKS)
        task = await self.get_task(event_id, task_id, user)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(task, field, value)

        task = await self._repository.update(task)
        logger.info(
            "Task updated",
            extra={"task_id": str(task_id), "updated_fields": sorted(update_data)},
        )
        return task

    async def remove_task(self, event_id: UUID, task_id: UUID, user: CurrentUser) -> None:
        authorize(user, Action.MANAGE_TASKS)
        task = await self.get_task(event_id, task_id, user)
        await self._repository.delete(task)
        logger.info(
            "Task removed",
            extra={"event_id": str(event_id), "task_id": str(task_id), "user_id": str(user.id)},
        )

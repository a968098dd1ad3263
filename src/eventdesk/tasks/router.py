"""
Task API routers.

``router`` serves tasks under their event; ``my_tasks_router`` lists the
caller's tasks across events.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import can_manage_tasks, can_read_tasks
from eventdesk.config import get_settings
from eventdesk.events.repository import EventRepository
from eventdesk.shared.database import get_db_session
from eventdesk.shared.schemas import PaginationMeta
from eventdesk.tasks.models import TaskStatus
from eventdesk.tasks.repository import TaskRepository
from eventdesk.tasks.schemas import (
    TaskCreate,
    TaskListResponse,
    TaskResponse,
    TaskUpdate,
)
from eventdesk.tasks.service import TaskService

router = APIRouter(prefix="/api/events/{event_id}/tasks", tags=["tasks"])
my_tasks_router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> TaskService:
    """Dependency for task service."""
    return TaskService(TaskRepository(session), EventRepository(session))


def _page_size(limit: int | None) -> int:
    settings = get_settings()
    return min(limit or settings.default_page_size, settings.max_page_size)


@my_tasks_router.get(
    "",
    response_model=TaskListResponse,
    summary="List my tasks",
)
async def list_my_tasks(
    current_user: Annotated[CurrentUser, Depends(can_read_tasks)],
    service: Annotated[TaskService, Depends(get_task_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
    status_filter: Annotated[TaskStatus | None, Query(alias="status")] = None,
) -> TaskListResponse:
    """Tasks created by the caller, earliest due date first."""
    page_size = _page_size(limit)
    tasks, total = await service.list_my_tasks(
        current_user,
        page=page,
        page_size=page_size,
        status=status_filter,
    )
    return TaskListResponse(
        tasks=[TaskResponse.model_validate(t) for t in tasks],
        pagination=PaginationMeta.build(page=page, limit=page_size, total=total),
    )


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks of an event",
)
async def list_tasks(
    event_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_read_tasks)],
    service: Annotated[TaskService, Depends(get_task_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
    status_filter: Annotated[TaskStatus | None, Query(alias="status")] = None,
) -> TaskListResponse:
    page_size = _page_size(limit)
    tasks, total = await service.list_tasks(
        event_id,
        current_user,
        page=page,
        page_size=page_size,
        status=status_filter,
    )
    return TaskListResponse(
        tasks=[TaskResponse.model_validate(t) for t in tasks],
        pagination=PaginationMeta.build(page=page, limit=page_size, total=total),
    )


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a task",
)
async def add_task(
    event_id: UUID,
    data: TaskCreate,
    current_user: Annotated[CurrentUser, Depends(can_manage_tasks)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    task = await service.add_task(event_id, data, current_user)
    return TaskResponse.model_validate(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task",
)
async def get_task(
    event_id: UUID,
    task_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_read_tasks)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    task = await service.get_task(event_id, task_id, current_user)
    return TaskResponse.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
)
async def update_task(
    event_id: UUID,
    task_id: UUID,
    data: TaskUpdate,
    current_user: Annotated[CurrentUser, Depends(can_manage_tasks)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    task = await service.update_task(event_id, task_id, data, current_user)
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a task",
)
async def remove_task(
    event_id: UUID,
    task_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_manage_tasks)],
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    await service.remove_task(event_id, task_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

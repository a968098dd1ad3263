"""
Task repository for database operations.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.shared.schemas import page_offset
from eventdesk.tasks.models import Task, TaskStatus


class TaskRepository:
    """Repository for task database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _paginate(
        self,
        query: Select[tuple[Task]],
        page: int,
        page_size: int,
    ) -> tuple[Sequence[Task], int]:
        count_stmt = select(func.count()).select_from(query.subquery())
        total = (await self._session.execute(count_stmt)).scalar() or 0

        # Undated tasks sort after dated ones.
        stmt = (
            query
            .order_by(Task.due_date.is_(None), Task.due_date, Task.created_at, Task.id)
            .offset(page_offset(page, page_size))
            .limit(page_size)
        )
        result = await self._session.execute(stmt)
        return result.scalars().all(), total

    async def list_by_event(
        self,
        event_id: UUID,
        page: int = 1,
        page_size: int = 50,
        status: TaskStatus | None = None,
    ) -> tuple[Sequence[Task], int]:
        """Get tasks of an event, earliest due date first.

        Returns:
            Tuple of (tasks list, total count).
        """
        query = select(Task).where(Task.event_id == event_id)
        if status is not None:
            query = query.where(Task.status == status)
        return await self._paginate(query, page, page_size)

    async def list_by_owner(
        self,
        owner_id: UUID,
        page: int = 1,
        page_size: int = 50,
        status: TaskStatus | None = None,
    ) -> tuple[Sequence[Task], int]:
        """Get the tasks a user created across all of their events."""
        query = select(Task).where(Task.user_id == owner_id)
        if status is not None:
            query = query.where(Task.status == status)
        return await self._paginate(query, page, page_size)

    async def get(self, event_id: UUID, task_id: UUID) -> Task | None:
        """Get a task by ID within an event."""
        stmt = select(Task).where(Task.id == task_id, Task.event_id == event_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, task: Task) -> Task:
        self._session.add(task)
        await self._session.flush()
        await self._session.refresh(task)
        return task

    async def update(self, task: Task) -> Task:
        await self._session.flush()
        await self._session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        await self._session.delete(task)
        await self._session.flush()

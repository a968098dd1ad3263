"""
Repository for dashboard statistics queries.

Every query is scoped to a single owner.
"""

import datetime as dt
from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.events.models import Event, EventStatus
from eventdesk.guests.models import Guest
from eventdesk.tasks.models import OPEN_TASK_STATUSES, Task

UPCOMING_EVENT_STATUSES = (EventStatus.PUBLISHED, EventStatus.DRAFT)


class DashboardRepository:
    """Repository for dashboard statistics queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _scalar_count(self, stmt) -> int:
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def count_events(self, owner_id: UUID) -> int:
        return await self._scalar_count(
            select(func.count(Event.id)).where(Event.user_id == owner_id)
        )

    async def count_upcoming_events(self, owner_id: UUID, now: dt.datetime) -> int:
        """Count draft or published events starting at ``now`` or later."""
        today = now.date()
        # Event.time is zero-padded HH:MM, so string order is time order.
        return await self._scalar_count(
            select(func.count(Event.id)).where(
                Event.user_id == owner_id,
                or_(
                    Event.date > today,
                    and_(Event.date == today, Event.time >= now.strftime("%H:%M")),
                ),
                Event.status.in_(UPCOMING_EVENT_STATUSES),
            )
        )

    async def count_completed_events(self, owner_id: UUID) -> int:
        return await self._scalar_count(
            select(func.count(Event.id)).where(
                Event.user_id == owner_id,
                Event.status == EventStatus.COMPLETED,
            )
        )

    async def count_guests(self, owner_id: UUID) -> int:
        """Count guests across every event the owner holds."""
        return await self._scalar_count(
            select(func.count(Guest.id))
            .join(Event, Guest.event_id == Event.id)
            .where(Event.user_id == owner_id)
        )

    async def count_open_tasks(self, owner_id: UUID) -> int:
        return await self._scalar_count(
            select(func.count(Task.id)).where(
                Task.user_id == owner_id,
                Task.status.in_(OPEN_TASK_STATUSES),
            )
        )

    async def recent_events(self, owner_id: UUID, limit: int = 5) -> Sequence[Event]:
        """Get the owner's most recently created events."""
        stmt = (
            select(Event)
            .where(Event.user_id == owner_id)
            .order_by(Event.created_at.desc(), Event.id)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

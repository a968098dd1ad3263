"""
Guest repository for database operations.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.guests.models import Guest, RsvpStatus
from eventdesk.shared.schemas import page_offset


class GuestRepository:
    """Repository for guest database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_by_event(
        self,
        event_id: UUID,
        page: int = 1,
        page_size: int = 50,
        rsvp_status: RsvpStatus | None = None,
    ) -> tuple[Sequence[Guest], int]:
        """Get guests of an event with pagination.

        Args:
            event_id: Event UUID.
            page: Page number (1-indexed).
            page_size: Number of items per page.
            rsvp_status: Optional RSVP filter.

        Returns:
            Tuple of (guests list, total count).
        """
        base_query = select(Guest).where(Guest.event_id == event_id)
        if rsvp_status is not None:
            base_query = base_query.where(Guest.rsvp_status == rsvp_status)

        count_stmt = select(func.count()).select_from(base_query.subquery())
        total = (await self._session.execute(count_stmt)).scalar() or 0

        stmt = (
            base_query
            .order_by(Guest.name, Guest.id)
            .offset(page_offset(page, page_size))
            .limit(page_size)
        )
        result = await self._session.execute(stmt)
        return result.scalars().all(), total

    async def get(self, event_id: UUID, guest_id: UUID) -> Guest | None:
        """Get a guest by ID within an event."""
        stmt = select(Guest).where(Guest.id == guest_id, Guest.event_id == event_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, guest: Guest) -> Guest:
        self._session.add(guest)
        await self._session.flush()
        await self._session.refresh(guest)
        return guest

    async def update(self, guest: Guest) -> Guest:
        await self._session.flush()
        await self._session.refresh(guest)
        return guest

    async def delete(self, guest: Guest) -> None:
        await self._session.delete(guest)
        await self._session.flush()

"""
Event repository for database operations.
"""

from typing import Protocol, Sequence
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.events.models import Event
from eventdesk.events.schemas import EventFilter
from eventdesk.shared.logging import get_logger
from eventdesk.shared.schemas import page_offset

logger = get_logger(__name__)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class EventRepositoryProtocol(Protocol):
    """Protocol for event repository operations."""

    async def list_events(
        self,
        event_filter: EventFilter,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[Sequence[Event], int]: ...
    async def create(self, event: Event) -> Event: ...
    async def get(self, owner_id: UUID, event_id: UUID) -> Event | None: ...
    async def update(self, event: Event) -> Event: ...
    async def delete(self, event: Event) -> None: ...


class EventRepository:
    """Repository for event database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session.
        """
        self._session = session

    @staticmethod
    def _filtered(event_filter: EventFilter) -> Select[tuple[Event]]:
        query = select(Event).where(Event.user_id == event_filter.owner_id)

        if event_filter.status is not None:
            query = query.where(Event.status == event_filter.status)

        if event_filter.search:
            pattern = f"%{_escape_like(event_filter.search.lower())}%"
            query = query.where(
                or_(
                    func.lower(Event.title).like(pattern, escape="\\"),
                    func.lower(Event.venue).like(pattern, escape="\\"),
                    func.lower(Event.organizer).like(pattern, escape="\\"),
                )
            )
        return query

    async def list_events(
        self,
        event_filter: EventFilter,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[Sequence[Event], int]:
        """List one owner's events, newest event date first.

        Args:
            event_filter: Owner scope plus optional status and search term.
            page: Page number (1-indexed).
            page_size: Number of items per page.

        Returns:
            Tuple of (events on the page, total matching count).
        """
        base_query = self._filtered(event_filter)

        count_stmt = select(func.count()).select_from(base_query.subquery())
        total = (await self._session.execute(count_stmt)).scalar() or 0

        stmt = (
            base_query
            .order_by(Event.date.desc(), Event.created_at.desc(), Event.id)
            .offset(page_offset(page, page_size))
            .limit(page_size)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalars().all(), total

    async def create(self, event: Event) -> Event:
        """Insert an event."""
        self._session.add(event)
        await self._session.flush()
        await self._session.refresh(event)
        logger.info("Created event", extra={"event_id": str(event.id)})
        return event

    async def get(self, owner_id: UUID, event_id: UUID) -> Event | None:
        """Get an event by ID, only if ``owner_id`` owns it."""
        stmt = (
            select(Event)
            .where(Event.id == event_id, Event.user_id == owner_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, event: Event) -> Event:
        """Flush pending changes on an event."""
        await self._session.flush()
        await self._session.refresh(event)
        logger.info("Updated event", extra={"event_id": str(event.id)})
        return event

    async def delete(self, event: Event) -> None:
        """Delete an event together with its guests and tasks."""
        await self._session.delete(event)
        await self._session.flush()
        logger.info("Deleted event", extra={"event_id": str(event.id)})

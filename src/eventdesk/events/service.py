"""
Event service for business logic.

Every operation takes the caller explicitly and is scoped to the events the
caller owns; another user's event is reported exactly like a missing one.
"""

from typing import Sequence
from uuid import UUID

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import Action, authorize
from eventdesk.events.models import Event
from eventdesk.events.repository import EventRepositoryProtocol
from eventdesk.events.schemas import EventCreate, EventFilter, EventUpdate
from eventdesk.shared.exceptions import NotFoundError
from eventdesk.shared.logging import get_logger

logger = get_logger(__name__)


class EventService:
    """Service for event business logic."""

    def __init__(self, repository: EventRepositoryProtocol) -> None:
        """Initialize service with repository."""
        self._repository = repository

    async def create_event(self, data: EventCreate, user: CurrentUser) -> Event:
        """Create an event owned by ``user``."""
        authorize(user, Action.CREATE_EVENT)

        event = Event(
            **data.model_dump(),
            user_id=user.id,
            guests=[],
            tasks=[],
        )
        event = await self._repository.create(event)
        logger.info(
            "Event created",
            extra={"event_id": str(event.id), "user_id": str(user.id)},
        )
        return event

    async def get_event(self, event_id: UUID, user: CurrentUser) -> Event:
        """Get one of the caller's events.

        Raises:
            NotFoundError: If no event with that ID belongs to the caller.
        """
        authorize(user, Action.READ_EVENTS)

        event = await self._repository.get(user.id, event_id)
        if event is None:
            raise NotFoundError(
                message=f"Event with ID {event_id} not found",
                code="EVENT_NOT_FOUND",
                details={"event_id": str(event_id)},
            )
        return event

    async def list_events(
        self,
        user: CurrentUser,
        event_filter: EventFilter,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[Sequence[Event], int]:
        """List the caller's events matching ``event_filter``."""
        authorize(user, Action.READ_EVENTS)

        if event_filter.owner_id != user.id:
            event_filter = event_filter.model_copy(update={"owner_id": user.id})

        return await self._repository.list_events(
            event_filter,
            page=page,
            page_size=page_size,
        )

    async def update_event(
        self,
        event_id: UUID,
        data: EventUpdate,
        user: CurrentUser,
    ) -> Event:
        """Apply the provided fields to one of the caller's events."""
        authorize(user, Action.UPDATE_EVENT)

        event = await self.get_event(event_id, user)
        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(event, field, value)

        event = await self._repository.update(event)
        logger.info(
            "Event updated",
            extra={
                "event_id": str(event.id),
                "user_id": str(user.id),
                "updated_fields": sorted(update_data),
            },
        )
        return event

    async def delete_event(self, event_id: UUID, user: CurrentUser) -> None:
        """Delete one of the caller's events with its guests and tasks."""
        authorize(user, Action.DELETE_EVENT)

        event = await self.get_event(event_id, user)
        await self._repository.delete(event)
        logger.info(
            "Event deleted",
            extra={"event_id": str(event_id), "user_id": str(user.id)},
        )

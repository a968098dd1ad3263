"""
Guest service.

Guests are reached through their event, so every call first resolves the
event among the caller's own events.
"""

from typing import Sequence
from uuid import UUID

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import Action, authorize
from eventdesk.events.models import Event
from eventdesk.events.repository import EventRepositoryProtocol
from eventdesk.guests.models import Guest, RsvpStatus
from eventdesk.guests.repository import GuestRepository
from eventdesk.guests.schemas import GuestCreate, GuestUpdate
from eventdesk.shared.exceptions import NotFoundError
from eventdesk.shared.logging import get_logger

logger = get_logger(__name__)


class GuestService:
    """Service for guest business logic."""

    def __init__(
        self,
        repository: GuestRepository,
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

    async def list_guests(
        self,
        event_id: UUID,
        user: CurrentUser,
        page: int = 1,
        page_size: int = 50,
        rsvp_status: RsvpStatus | None = None,
    ) -> tuple[Sequence[Guest], int]:
        authorize(user, Action.READ_GUESTS)
        await self._owned_event(event_id, user)
        return await self._repository.list_by_event(
            event_id,
            page=page,
            page_size=page_size,
            rsvp_status=rsvp_status,
        )

    async def get_guest(self, event_id: UUID, guest_id: UUID, user: CurrentUser) -> Guest:
        """Get a guest of one of the caller's events.

        Raises:
            NotFoundError: If the event or the guest does not exist for the caller.
        """
        authorize(user, Action.READ_GUESTS)
        await self._owned_event(event_id, user)

        guest = await self._repository.get(event_id, guest_id)
        if guest is None:
            raise NotFoundError(
                message=f"Guest with ID {guest_id} not found",
                code="GUEST_NOT_FOUND",
                details={"event_id": str(event_id), "guest_id": str(guest_id)},
            )
        return guest

    async def add_guest(self, event_id: UUID, data: GuestCreate, user: CurrentUser) -> Guest:
        authorize(user, Action.MANAGE_GUESTS)
        event = await self._owned_event(event_id, user)

        guest = Guest(**data.model_dump())
        event.guests.append(guest)
        guest = await self._repository.create(guest)
        logger.info(
            "Guest added",
            extra={"event_id": str(event_id), "guest_id": str(guest.id), "user_id": str(user.id)},
        )
        return guest

    async def update_guest(
        self,
        event_id: UUID,
        guest_id: UUID,
        data: GuestUpdate,
        user: CurrentUser,
    ) -> Guest:
        authorize(user, Action.MANAGE_GUESTS)
        guest = await self.get_guest(event_id, guest_id, user)

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(guest, field, value)

        guest = await self._repository.update(guest)
        logger.info(
            "Guest updated",
            extra={"event_id": str(event_id), "guest_id": str(guest_id), "rsvp_status": guest.rsvp_status.value},
        )
        return guest

    async def remove_guest(self, event_id: UUID, guest_id: UUID, user: CurrentUser) -> None:
        authorize(user, Action.MANAGE_GUESTS)
        guest = await self.get_guest(event_id, guest_id, user)
        await self._repository.delete(guest)
        logger.info(
            "Guest removed",
            extra={"event_id": str(event_id), "guest_id": str(guest_id), "user_id": str(user.id)},
        )

"""
Guest API router.

Guests live under their event: /api/events/{event_id}/guests.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import can_manage_guests, can_read_guests
from eventdesk.config import get_settings
from eventdesk.events.repository import EventRepository
from eventdesk.guests.models import RsvpStatus
from eventdesk.guests.repository import GuestRepository
from eventdesk.guests.schemas import (
    GuestCreate,
    GuestListResponse,
    GuestResponse,
    GuestUpdate,
)
from eventdesk.guests.service import GuestService
from eventdesk.shared.database import get_db_session
from eventdesk.shared.schemas import PaginationMeta

router = APIRouter(prefix="/api/events/{event_id}/guests", tags=["guests"])


def get_guest_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> GuestService:
    """Dependency for guest service."""
    return GuestService(GuestRepository(session), EventRepository(session))


@router.get(
    "",
    response_model=GuestListResponse,
    summary="List guests of an event",
)
async def list_guests(
    event_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_read_guests)],
    service: Annotated[GuestService, Depends(get_guest_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
    rsvp_status: Annotated[RsvpStatus | None, Query(alias="rsvpStatus")] = None,
) -> GuestListResponse:
    settings = get_settings()
    page_size = min(limit or settings.default_page_size, settings.max_page_size)

    guests, total = await service.list_guests(
        event_id,
        current_user,
        page=page,
        page_size=page_size,
        rsvp_status=rsvp_status,
    )
    return GuestListResponse(
        guests=[GuestResponse.model_validate(g) for g in guests],
        pagination=PaginationMeta.build(page=page, limit=page_size, total=total),
    )


@router.post(
    "",
    response_model=GuestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a guest",
)
async def add_guest(
    event_id: UUID,
    data: GuestCreate,
    current_user: Annotated[CurrentUser, Depends(can_manage_guests)],
    service: Annotated[GuestService, Depends(get_guest_service)],
) -> GuestResponse:
    guest = await service.add_guest(event_id, data, current_user)
    return GuestResponse.model_validate(guest)


@router.get(
    "/{guest_id}",
    response_model=GuestResponse,
    summary="Get a guest",
)
async def get_guest(
    event_id: UUID,
    guest_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_read_guests)],
    service: Annotated[GuestService, Depends(get_guest_service)],
) -> GuestResponse:
    guest = await service.get_guest(event_id, guest_id, current_user)
    return GuestResponse.model_validate(guest)


@router.put(
    "/{guest_id}",
    response_model=GuestResponse,
    summary="Update a guest",
)
async def update_guest(
    event_id: UUID,
    guest_id: UUID,
    data: GuestUpdate,
    current_user: Annotated[CurrentUser, Depends(can_manage_guests)],
    service: Annotated[GuestService, Depends(get_guest_service)],
) -> GuestResponse:
    """Update guest details or record an RSVP answer."""
    guest = await service.update_guest(event_id, guest_id, data, current_user)
    return GuestResponse.model_validate(guest)


@router.delete(
    "/{guest_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a guest",
)
async def remove_guest(
    event_id: UUID,
    guest_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_manage_guests)],
    service: Annotated[GuestService, Depends(get_guest_service)],
) -> Response:
    await service.remove_guest(event_id, guest_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Event API router.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import (
    can_create_event,
    can_delete_event,
    can_read_events,
    can_update_event,
)
from eventdesk.config import get_settings
from eventdesk.events.models import EventStatus
from eventdesk.events.repository import EventRepository
from eventdesk.events.schemas import (
    EventCreate,
    EventDetail,
    EventFilter,
    EventListItem,
    EventListResponse,
    EventResponse,
    EventUpdate,
)
from eventdesk.events.service import EventService
from eventdesk.shared.database import get_db_session
from eventdesk.shared.schemas import PaginationMeta

router = APIRouter(prefix="/api/events", tags=["events"])


def get_event_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> EventService:
    """Dependency for event service."""
    return EventService(EventRepository(session))


@router.get(
    "",
    response_model=EventListResponse,
    summary="List events",
)
async def list_events(
    current_user: Annotated[CurrentUser, Depends(can_read_events)],
    service: Annotated[EventService, Depends(get_event_service)],
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[int | None, Query(ge=1, description="Items per page")] = None,
    status_filter: Annotated[
        EventStatus | None,
        Query(alias="status", description="Filter by event status"),
    ] = None,
    search: Annotated[
        str | None,
        Query(max_length=255, description="Match title, venue or organizer"),
    ] = None,
) -> EventListResponse:
    """Paginated list of the caller's events, most recent event date first."""
    settings = get_settings()
    page_size = min(limit or settings.default_page_size, settings.max_page_size)

    events, total = await service.list_events(
        current_user,
        EventFilter(owner_id=current_user.id, status=status_filter, search=search),
        page=page,
        page_size=page_size,
    )

    return EventListResponse(
        events=[EventListItem.model_validate(e) for e in events],
        pagination=PaginationMeta.build(page=page, limit=page_size, total=total),
    )


@router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an event",
)
async def create_event(
    data: EventCreate,
    current_user: Annotated[CurrentUser, Depends(can_create_event)],
    service: Annotated[EventService, Depends(get_event_service)],
) -> EventResponse:
    """Create an event owned by the caller. Viewers may not create events."""
    event = await service.create_event(data, current_user)
    return EventResponse.model_validate(event)


@router.get(
    "/{event_id}",
    response_model=EventDetail,
    summary="Get an event",
)
async def get_event(
    event_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_read_events)],
    service: Annotated[EventService, Depends(get_event_service)],
) -> EventDetail:
    event = await service.get_event(event_id, current_user)
    return EventDetail.model_validate(event)


@router.put(
    "/{event_id}",
    response_model=EventResponse,
    summary="Update an event",
)
async def update_event(
    event_id: UUID,
    data: EventUpdate,
    current_user: Annotated[CurrentUser, Depends(can_update_event)],
    service: Annotated[EventService, Depends(get_event_service)],
) -> EventResponse:
    """Update the provided fields of one of the caller's events."""
    event = await service.update_event(event_id, data, current_user)
    return EventResponse.model_validate(event)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event",
)
async def delete_event(
    event_id: UUID,
    current_user: Annotated[CurrentUser, Depends(can_delete_event)],
    service: Annotated[EventService, Depends(get_event_service)],
) -> Response:
    """Delete an event; its guests and tasks are deleted with it."""
    await service.delete_event(event_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

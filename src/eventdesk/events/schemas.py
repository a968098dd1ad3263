"""
Pydantic schemas for event management.
"""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eventdesk.events.models import EventStatus
from eventdesk.guests.models import RsvpStatus
from eventdesk.guests.schemas import GuestResponse
from eventdesk.shared.schemas import CamelModel, PaginationMeta
from eventdesk.tasks.models import TaskStatus
from eventdesk.tasks.schemas import TaskResponse

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class EventBase(CamelModel):
    """Fields shared by event create and response schemas."""

    title: str = Field(..., min_length=1, max_length=255, description="Event title")
    description: str | None = Field(default=None, description="Free-form description")
    date: dt.date = Field(..., description="Calendar date of the event")
    time: str = Field(..., pattern=TIME_PATTERN, description="Start time, HH:MM")
    venue: str = Field(..., min_length=1, max_length=255, description="Venue space")
    organizer: str = Field(..., min_length=1, max_length=255, description="Organizing team")
    status: EventStatus = Field(default=EventStatus.DRAFT, description="Lifecycle status")
    images: str = Field(default="", description="Image references")
    documents: str = Field(default="", description="Document references")


class EventCreate(EventBase):
    """Schema for creating an event."""

    @field_validator("title", "venue", "organizer")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return _strip_required(v)


class EventUpdate(CamelModel):
    """Schema for updating an event; only provided fields change."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    date: dt.date | None = None
    time: str | None = Field(default=None, pattern=TIME_PATTERN)
    venue: str | None = Field(default=None, min_length=1, max_length=255)
    organizer: str | None = Field(default=None, min_length=1, max_length=255)
    status: EventStatus | None = None
    images: str | None = None
    documents: str | None = None

    @field_validator("title", "venue", "organizer", "date", "time", "status", "images", "documents")
    @classmethod
    def reject_null(cls, v):
        # Only description may be cleared; the rest are required columns.
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator("title", "venue", "organizer")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return _strip_required(v)


class GuestSummary(CamelModel):
    id: UUID
    rsvp_status: RsvpStatus


class TaskSummary(CamelModel):
    id: UUID
    status: TaskStatus


class EventResponse(EventBase):
    """Full event representation."""

    id: UUID
    user_id: UUID
    created_at: dt.datetime
    updated_at: dt.datetime


class EventListItem(EventResponse):
    """Event in a list, with the RSVP and task states of its children."""

    guests: list[GuestSummary] = Field(default_factory=list)
    tasks: list[TaskSummary] = Field(default_factory=list)


class EventDetail(EventResponse):
    """Single event with its full guest list and tasks."""

    guests: list[GuestResponse] = Field(default_factory=list)
    tasks: list[TaskResponse] = Field(default_factory=list)


class EventListResponse(CamelModel):
    """Paginated event list."""

    events: list[EventListItem]
    pagination: PaginationMeta


class EventFilter(BaseModel):
    """Typed listing filter; listings are always scoped to one owner."""

    model_config = ConfigDict(frozen=True)

    owner_id: UUID
    status: EventStatus | None = None
    search: str | None = Field(default=None, max_length=255)

    @field_validator("search")
    @classmethod
    def normalize_search(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

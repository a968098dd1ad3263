"""
Pydantic schemas for guest management.
"""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from eventdesk.guests.models import RsvpStatus
from eventdesk.shared.schemas import CamelModel, PaginationMeta


class GuestCreate(CamelModel):
    """Schema for adding a guest to an event."""

    name: str = Field(..., min_length=1, max_length=255, description="Guest name")
    email: EmailStr | None = Field(default=None, description="Contact email")
    phone: str | None = Field(default=None, max_length=50, description="Contact phone")
    rsvp_status: RsvpStatus = Field(default=RsvpStatus.PENDING, description="RSVP state")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class GuestUpdate(CamelModel):
    """Schema for updating a guest; only provided fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    rsvp_status: RsvpStatus | None = None

    @field_validator("name", "rsvp_status")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class GuestResponse(CamelModel):
    """Guest representation."""

    id: UUID
    event_id: UUID
    name: str
    email: str | None
    phone: str | None
    rsvp_status: RsvpStatus
    created_at: datetime
    updated_at: datetime


class GuestListResponse(CamelModel):
    """Paginated guest list of one event."""

    guests: list[GuestResponse]
    pagination: PaginationMeta

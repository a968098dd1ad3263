"""
Pydantic schemas for the dashboard overview.
"""

import datetime as dt
from uuid import UUID

from pydantic import Field

from eventdesk.events.models import EventStatus
from eventdesk.shared.schemas import CamelModel


class DashboardStats(CamelModel):
    """Headline counts for the caller's events."""

    total_events: int = Field(..., ge=0)
    upcoming_events: int = Field(..., ge=0, description="Draft or published events not yet started")
    completed_events: int = Field(..., ge=0)
    total_guests: int = Field(..., ge=0, description="Guests across all owned events")
    pending_tasks: int = Field(..., ge=0, description="Own tasks not yet completed")


class RecentEvent(CamelModel):
    """Event summary shown on the dashboard."""

    id: UUID
    title: str
    venue: str
    date: dt.date
    status: EventStatus
    created_at: dt.datetime


class DashboardResponse(CamelModel):
    """Dashboard overview payload."""

    stats: DashboardStats
    recent_events: list[RecentEvent]

"""
SQLAlchemy models for events.
"""

import datetime as dt
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import (
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventdesk.shared.database import Base

if TYPE_CHECKING:
    from eventdesk.guests.models import Guest
    from eventdesk.tasks.models import Task


class EventStatus(str, Enum):
    """Event lifecycle status."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Event(Base):
    """An event hosted at the venue, owned by the user who created it."""

    __tablename__ = "events"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    date: Mapped[dt.date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )
    time: Mapped[str] = mapped_column(
        String(5),
        nullable=False,
    )
    venue: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    organizer: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    status: Mapped[EventStatus] = mapped_column(
        SQLEnum(EventStatus, name="event_status"),
        nullable=False,
        default=EventStatus.DRAFT,
        index=True,
    )
    images: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    documents: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Deleting an event deletes its guests and tasks.
    guests: Mapped[list["Guest"]] = relationship(
        "Guest",
        back_populates="event",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Guest.created_at",
    )
    tasks: Mapped[list["Task"]] = relationship(
        "Task",
        back_populates="event",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Task.created_at",
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, status={self.status})>"

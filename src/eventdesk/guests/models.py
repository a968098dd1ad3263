"""
SQLAlchemy models for guests.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum as SQLEnum, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventdesk.shared.database import Base

if TYPE_CHECKING:
    from eventdesk.events.models import Event


class RsvpStatus(str, Enum):
    """A guest's answer to the invitation."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DECLINED = "DECLINED"


class Guest(Base):
    """A person invited to an event."""

    __tablename__ = "guests"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
    )
    event_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    phone: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
    )
    rsvp_status: Mapped[RsvpStatus] = mapped_column(
        SQLEnum(RsvpStatus, name="rsvp_status"),
        nullable=False,
        default=RsvpStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    event: Mapped["Event"] = relationship(
        "Event",
        back_populates="guests",
    )

    def __repr__(self) -> str:
        return f"<Guest(id={self.id}, name={self.name}, rsvp={self.rsvp_status})>"

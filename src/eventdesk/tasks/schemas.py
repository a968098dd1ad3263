"""
Pydantic schemas for task management.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from eventdesk.shared.schemas import CamelModel, PaginationMeta
from eventdesk.tasks.models import TaskStatus


class TaskCreate(CamelModel):
    """Schema for adding a task to an event."""

    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    description: str | None = Field(default=None, description="Task details")
    due_date: datetime | None = Field(default=None, description="Deadline")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Progress")
    assigned_to: str | None = Field(default=None, max_length=255, description="Assignee name")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class TaskUpdate(CamelModel):
    """Schema for updating a task; only provided fields change."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    due_date: datetime | None = None
    status: TaskStatus | None = None
    assigned_to: str | None = Field(default=None, max_length=255)

    @field_validator("title", "status")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class TaskResponse(CamelModel):
    """Task representation."""

    id: UUID
    event_id: UUID
    user_id: UUID
    title: str
    description: str | None
    due_date: datetime | None
    status: TaskStatus
    assigned_to: str | None
    created_at: datetime
    updated_at: datetime


class TaskListResponse(CamelModel):
    """Paginated task list."""

    tasks: list[TaskResponse]
    pagination: PaginationMeta

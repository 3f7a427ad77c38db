"""Pydantic models for tasks."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(BaseModel):
    """A stored task.

    ``id`` and the timestamps are assigned by the store; a task that has not
    been saved yet has ``id=None``.
    """

    id: str | None = None
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    due_date: date | None = None
    category: str | None = None
    created_at: int = 0
    updated_at: int = 0


def _title_not_blank(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValueError("Title is required")
    return value


class TaskCreate(BaseModel):
    """Request model for creating a task."""

    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    status: TaskStatus = TaskStatus.TODO
    due_date: date | None = None
    category: str | None = Field(None, max_length=50)

    check_title = field_validator("title")(_title_not_blank)


class TaskUpdate(TaskCreate):
    """Request model for replacing a task.

    Every mutable field is replaced, so an omitted description or category
    clears the stored value.
    """


class TaskPatch(BaseModel):
    """Request model for a partial update. Only fields that are sent change."""

    title: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    status: TaskStatus | None = None
    due_date: date | None = None
    category: str | None = Field(None, max_length=50)

    check_title = field_validator("title")(_title_not_blank)

    @field_validator("status")
    @classmethod
    def check_status(cls, value: TaskStatus | None) -> TaskStatus:
        # Defaults are not validated, so this only rejects an explicit null.
        if value is None:
            raise ValueError("Status may not be null")
        return value


class TaskResponse(BaseModel):
    """Response model for a task."""

    id: str
    title: str
    description: str | None
    status: TaskStatus
    due_date: date | None
    category: str | None
    created_at: int
    updated_at: int

"""Models package."""

from .task import (
    Task,
    TaskCreate,
    TaskPatch,
    TaskResponse,
    TaskStatus,
    TaskUpdate,
)

__all__ = [
    "Task",
    "TaskStatus",
    "TaskCreate",
    "TaskUpdate",
    "TaskPatch",
    "TaskResponse",
]

"""Database package."""

from .base import TaskStore
from .client import SqliteTaskStore, build_where
from .memory import InMemoryTaskStore

__all__ = [
    "TaskStore",
    "SqliteTaskStore",
    "InMemoryTaskStore",
    "build_where",
]

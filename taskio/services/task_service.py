"""Task lifecycle operations and the search entry point."""

import logging
from datetime import date

from ..db import TaskStore
from ..errors import TaskNotFoundError
from ..models import Task, TaskCreate, TaskPatch, TaskStatus, TaskUpdate
from ..search import normalize

logger = logging.getLogger(__name__)


class TaskService:
    """Operations on tasks, backed by a ``TaskStore``."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def get_all_tasks(self) -> list[Task]:
        return self.store.find_all()

    def get_task(self, task_id: str) -> Task:
        task = self.store.find_by_id(task_id)
        if task is None:
            logger.warning("Task not found id=%s", task_id)
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, data: TaskCreate) -> Task:
        task = self.store.save(Task(**data.model_dump()))
        logger.info("Created task id=%s", task.id)
        return task

    def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        """Replace every mutable field of a task, category included."""
        existing = self.get_task(task_id)
        task = self.store.save(existing.model_copy(update=data.model_dump()))
        logger.info("Updated task id=%s", task_id)
        return task

    def patch_task(self, task_id: str, data: TaskPatch) -> Task:
        """Replace only the fields present in the request."""
        existing = self.get_task(task_id)
        changes = data.model_dump(exclude_unset=True)
        task = self.store.save(existing.model_copy(update=changes))
        logger.info("Patched task id=%s fields=%s", task_id, sorted(changes))
        return task

    def delete_task(self, task_id: str) -> None:
        task = self.get_task(task_id)
        self.store.delete(task)
        logger.info("Deleted task id=%s", task_id)

    def get_all_categories(self) -> list[str]:
        return self.store.distinct_categories()

    def search_and_filter(
        self,
        search_term: str | None = None,
        status: TaskStatus | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        category: str | None = None,
    ) -> list[Task]:
        """Return the tasks matching every given filter.

        With no filters, or only a blank search term, every task is returned.
        """
        criteria = normalize(search_term, status, start_date, end_date, category)
        if criteria.is_empty:
            return self.store.find_all()
        return self.store.find_matching(criteria)

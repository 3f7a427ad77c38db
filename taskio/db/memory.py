"""In-memory task store."""

import threading
import time

from ulid import ULID

from ..errors import TaskNotFoundError
from ..models import Task
from ..search import FilterCriteria, resolve


class InMemoryTaskStore:
    """Task store kept in a dict, evaluating searches with the resolver."""

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {}
        for task in tasks or []:
            self.save(task)

    def find_all(self) -> list[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def find_by_id(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def find_matching(self, criteria: FilterCriteria) -> list[Task]:
        return resolve(criteria, self.find_all())

    def save(self, task: Task) -> Task:
        now = int(time.time())
        with self._lock:
            if task.id is None:
                stored = task.model_copy(
                    update={"id": str(ULID()), "created_at": now, "updated_at": now}
                )
            elif task.id in self._tasks:
                stored = task.model_copy(update={"updated_at": now})
            else:
                raise TaskNotFoundError(task.id)
            self._tasks[stored.id] = stored
            return stored.model_copy()

    def delete(self, task: Task) -> None:
        with self._lock:
            if self._tasks.pop(task.id, None) is None:
                raise TaskNotFoundError(task.id)

    def distinct_categories(self) -> list[str]:
        with self._lock:
            return sorted(
                {task.category for task in self._tasks.values() if task.category is not None}
            )

"""Storage interface the service layer depends on."""

from typing import Protocol

from ..models import Task
from ..search import FilterCriteria


class TaskStore(Protocol):
    """Persistence collaborator for tasks.

    ``find_all`` and ``find_matching`` return tasks in insertion order.
    ``save`` inserts a task whose ``id`` is ``None`` (assigning one) and
    replaces an existing task otherwise. ``save`` on a missing id and
    ``delete`` of a missing task raise ``TaskNotFoundError``.
    """

    def find_all(self) -> list[Task]: ...

    def find_by_id(self, task_id: str) -> Task | None: ...

    def find_matching(self, criteria: FilterCriteria) -> list[Task]: ...

    def save(self, task: Task) -> Task: ...

    def delete(self, task: Task) -> None: ...

    def distinct_categories(self) -> list[str]: ...

"""In-process evaluation of search criteria against a task collection."""

from collections.abc import Iterable

from ..models import Task
from .criteria import FilterCriteria


def matches_text(task: Task, term: str) -> bool:
    needle = term.lower()
    if needle in task.title.lower():
        return True
    return task.description is not None and needle in task.description.lower()


def matches_date_range(task: Task, criteria: FilterCriteria) -> bool:
    if task.due_date is None:
        return False
    if criteria.start_date is not None and task.due_date < criteria.start_date:
        return False
    if criteria.end_date is not None and task.due_date > criteria.end_date:
        return False
    return True


def matches(task: Task, criteria: FilterCriteria) -> bool:
    """Return True if the task satisfies every present criterion."""
    if criteria.search_term is not None and not matches_text(task, criteria.search_term):
        return False
    if criteria.status is not None and task.status != criteria.status:
        return False
    if (criteria.start_date is not None or criteria.end_date is not None) and not (
        matches_date_range(task, criteria)
    ):
        return False
    if criteria.category is not None and task.category != criteria.category:
        return False
    return True


def resolve(criteria: FilterCriteria, tasks: Iterable[Task]) -> list[Task]:
    """Narrow ``tasks`` to those matching ``criteria``, keeping their order.

    With no criteria at all the whole collection is returned as is.
    """
    if criteria.is_empty:
        return list(tasks)
    return [task for task in tasks if matches(task, criteria)]

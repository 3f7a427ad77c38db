"""Errors raised by the service and storage layers."""


class TaskNotFoundError(LookupError):
    """No task exists with the given id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found with id: {task_id}")
        self.task_id = task_id

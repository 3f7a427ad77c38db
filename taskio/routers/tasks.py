"""Task API router."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..errors import TaskNotFoundError
from ..models import (
    Task,
    TaskCreate,
    TaskPatch,
    TaskResponse,
    TaskStatus,
    TaskUpdate,
)
from ..services import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


# =============================================================================
# Helper Functions
# =============================================================================


def get_task_service(request: Request) -> TaskService:
    """Return the service bound to the running application."""
    return request.app.state.task_service


def to_response(task: Task) -> TaskResponse:
    return TaskResponse(**task.model_dump())


def not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Task not found",
    )


# =============================================================================
# Collection Endpoints - Must be defined BEFORE /{task_id} routes
# =============================================================================


@router.get("", response_model=list[TaskResponse])
def list_tasks(service: TaskService = Depends(get_task_service)):
    """Get all tasks."""
    return [to_response(task) for task in service.get_all_tasks()]


@router.get("/search", response_model=list[TaskResponse])
def search_tasks(
    q: str | None = None,
    status: TaskStatus | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    category: str | None = None,
    service: TaskService = Depends(get_task_service),
):
    """Search tasks by title/description and filter by status, due date range and category."""
    tasks = service.search_and_filter(q, status, start_date, end_date, category)
    return [to_response(task) for task in tasks]


@router.get("/categories", response_model=list[str])
def list_categories(service: TaskService = Depends(get_task_service)):
    """Get all distinct task categories, sorted."""
    return service.get_all_categories()


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(
    task_data: TaskCreate, service: TaskService = Depends(get_task_service)
):
    """Create a new task."""
    return to_response(service.create_task(task_data))


# =============================================================================
# Single Task Endpoints
# =============================================================================


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Get a task by ID."""
    try:
        return to_response(service.get_task(task_id))
    except TaskNotFoundError:
        raise not_found()


@router.put("/{task_id}", response_model=TaskResponse)
def update_task_endpoint(
    task_id: str,
    task_data: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Replace a task. Omitted optional fields are cleared."""
    try:
        return to_response(service.update_task(task_id, task_data))
    except TaskNotFoundError:
        raise not_found()


@router.patch("/{task_id}", response_model=TaskResponse)
def patch_task_endpoint(
    task_id: str,
    task_data: TaskPatch,
    service: TaskService = Depends(get_task_service),
):
    """Update only the fields sent in the request."""
    try:
        return to_response(service.patch_task(task_id, task_data))
    except TaskNotFoundError:
        raise not_found()


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_endpoint(
    task_id: str, service: TaskService = Depends(get_task_service)
):
    """Delete a task."""
    try:
        service.delete_task(task_id)
    except TaskNotFoundError:
        raise not_found()

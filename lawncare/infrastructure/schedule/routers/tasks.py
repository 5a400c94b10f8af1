"""API routes for care tasks."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.domain.common.exceptions import DomainError
from lawncare.domain.common.value_objects import TaskId
from lawncare.exceptions import LawnCareError, TaskNotFoundError
from lawncare.infrastructure.common.di import get_lawn_care_store
from lawncare.infrastructure.schedule.mappers import TaskMapper
from lawncare.infrastructure.schedule.schemas import (
    Task,
    TaskDetails,
    TasksResponse,
    TaskToggleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

mapper = TaskMapper()


@router.get("", response_model=TasksResponse, status_code=status.HTTP_200_OK)
def list_tasks(
    day: date | None = Query(None, description="Only tasks scheduled on this day"),
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> TasksResponse:
    """
    List care tasks, earliest first, each with its current recommendation.

    Args:
        day: Optional calendar day filter
        store: Lawn care store injected via dependency container

    Returns:
        Tasks ordered by date
    """
    pairs = store.list_tasks_with_details(day)
    return TasksResponse(tasks=[mapper.to_schema(task, details) for task, details in pairs])


@router.post("/reschedule", response_model=TasksResponse, status_code=status.HTTP_200_OK)
def reschedule_tasks(store: LawnCareStore = Depends(get_lawn_care_store)) -> TasksResponse:
    """Re-derive the task batch from the current profile and fertilizer."""
    store.reschedule_tasks()
    pairs = store.list_tasks_with_details()
    return TasksResponse(tasks=[mapper.to_schema(task, details) for task, details in pairs])


@router.get("/{task_id}/details", response_model=TaskDetails, status_code=status.HTTP_200_OK)
def get_task_details(
    task_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> TaskDetails:
    """
    Get the recommended amount for a task.

    Raises:
        TaskNotFoundError: If the task does not exist
    """
    found = store.get_task_with_details(TaskId(task_id))
    if found is None:
        raise TaskNotFoundError(task_id)
    _, details = found
    return mapper.details_to_schema(details)


@router.post("/{task_id}/toggle", response_model=TaskToggleResponse, status_code=status.HTTP_200_OK)
def toggle_task_completion(
    task_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> TaskToggleResponse:
    """
    Mark a task complete, or reopen it.

    Completing a task records its labor cost as an expense. Reopening it
    keeps that expense.

    Raises:
        TaskNotFoundError: If the task does not exist
        HTTPException: If the toggle fails unexpectedly
    """
    try:
        if not store.toggle_task_completion(TaskId(task_id)):
            raise TaskNotFoundError(task_id)
        found = store.get_task_with_details(TaskId(task_id))
        assert found is not None
        task, details = found
        return TaskToggleResponse(
            success=True,
            message="Task completed" if task.completed else "Task reopened",
            task=mapper.to_schema(task, details),
        )
    except (LawnCareError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to toggle task {task_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

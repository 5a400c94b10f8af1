"""Pydantic schemas for care task endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from lawncare.domain.schedule.entities import RecommendedUnit, TaskType


class TaskDetails(BaseModel):
    """Schema for the recommended amount of a task."""

    amount: float | None = Field(None, description="Recommended amount, null when unavailable")
    unit: str | None = Field(None, description="Unit of the amount (mm, min or g)")
    description: str = Field(..., description="Explanation of the amount")
    available: bool = Field(..., description="Whether a recommendation could be computed")


class Task(BaseModel):
    """Schema for a care task with its current recommendation."""

    id: str
    type: TaskType
    date: datetime
    duration: int = Field(..., description="Expected duration in minutes")
    completed: bool
    recommended_amount: float | None = None
    recommended_unit: RecommendedUnit | None = None
    details: TaskDetails


class TasksResponse(BaseModel):
    """Schema for a list of tasks, ordered by date."""

    tasks: list[Task]


class TaskToggleResponse(BaseModel):
    """Schema for the task completion toggle response."""

    success: bool
    message: str
    task: Task

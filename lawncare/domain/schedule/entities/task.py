"""Care task entity."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, get_args

from lawncare.domain.common.entity import Entity
from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import TaskId

TaskType = Literal["Mowing", "Watering", "Fertilizing", "Aeration", "Topdressing"]
RecommendedUnit = Literal["g", "L", "min"]

TASK_TYPES: tuple[str, ...] = get_args(TaskType)
RECOMMENDED_UNITS: tuple[str, ...] = get_args(RecommendedUnit)


@dataclass
class Task(Entity[TaskId]):
    """
    A scheduled piece of lawn work.

    Business Rules:
    - Duration is a positive number of minutes
    - Only the completion flag changes after the task is scheduled
    """

    id: TaskId
    type: TaskType
    date: datetime
    duration: int
    completed: bool = False
    recommended_amount: float | None = None
    recommended_unit: RecommendedUnit | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.type not in TASK_TYPES:
            raise ValidationError("Unknown task type", field="type", value=self.type)
        if self.duration <= 0:
            raise ValidationError("Duration must be positive", field="duration", value=self.duration)
        if self.recommended_unit is not None and self.recommended_unit not in RECOMMENDED_UNITS:
            raise ValidationError(
                "Unknown recommended unit", field="recommended_unit", value=self.recommended_unit
            )

    def toggle_completion(self) -> bool:
        """
        Flip the completion flag.

        Returns:
            True if the task has just been completed, False if it was reopened
        """
        self.completed = not self.completed
        return self.completed

    def set_recommendation(self, amount: float | None, unit: RecommendedUnit | None) -> None:
        """Replace the recommended amount after the profile or fertilizer changed."""
        if unit is not None and unit not in RECOMMENDED_UNITS:
            raise ValidationError("Unknown recommended unit", field="recommended_unit", value=unit)
        self.recommended_amount = amount
        self.recommended_unit = unit

    def falls_on(self, day: date) -> bool:
        """Check if the task is scheduled on the given calendar day."""
        return self.date.date() == day

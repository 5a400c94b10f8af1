"""Mapper for Task Domain → API schema conversion."""

from lawncare.domain.schedule.entities import Task
from lawncare.domain.schedule.services import TaskDetails
from lawncare.infrastructure.schedule import schemas


class TaskMapper:
    """Mapper for Task and TaskDetails."""

    def details_to_schema(self, details: TaskDetails) -> schemas.TaskDetails:
        return schemas.TaskDetails(
            amount=details.amount,
            unit=details.unit,
            description=details.description,
            available=details.available,
        )

    def to_schema(self, task: Task, details: TaskDetails) -> schemas.Task:
        return schemas.Task(
            id=task.id.value,
            type=task.type,
            date=task.date,
            duration=task.duration,
            completed=task.completed,
            recommended_amount=task.recommended_amount,
            recommended_unit=task.recommended_unit,
            details=self.details_to_schema(details),
        )

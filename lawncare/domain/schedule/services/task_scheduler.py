"""Derivation of the care task batch from the lawn profile."""

from datetime import datetime, timedelta

from lawncare.domain.common.value_objects import TaskId
from lawncare.domain.profile.entities import Fertilizer, LawnProfile
from lawncare.domain.schedule.entities import RECOMMENDED_UNITS, RecommendedUnit, Task, TaskType
from lawncare.domain.schedule.services.task_details_calculator import TaskDetailsCalculator

# (task type, days after start, duration in minutes)
TASK_PLAN: tuple[tuple[TaskType, int, int], ...] = (
    ("Mowing", 0, 30),
    ("Watering", 2, 15),
    ("Fertilizing", 5, 10),
)

TaskBatch = list[Task]


def _recommendation(
    task_type: TaskType,
    profile: LawnProfile,
    fertilizer: Fertilizer | None,
) -> tuple[float | None, RecommendedUnit | None]:
    """Amount and unit stored on a task; None for results not in a task unit."""
    details = TaskDetailsCalculator.details_for(task_type, profile, fertilizer)
    if details.available and details.unit in RECOMMENDED_UNITS:
        return details.amount, details.unit  # type: ignore[return-value]
    return None, None


def derive_tasks(
    profile: LawnProfile,
    fertilizer: Fertilizer | None,
    start: datetime,
) -> TaskBatch:
    """
    Build the batch of upcoming care tasks.

    Pure function: the same profile, fertilizer and start always yield the
    same batch. Every task starts incomplete and carries the recommended
    amount known at derivation time.

    Args:
        profile: Lawn profile the recommendations are computed from
        fertilizer: Active fertilizer, if any
        start: Date of the first task

    Returns:
        Tasks ordered by date
    """
    tasks: TaskBatch = []
    for position, (task_type, offset_days, duration) in enumerate(TASK_PLAN, start=1):
        amount, unit = _recommendation(task_type, profile, fertilizer)
        tasks.append(
            Task(
                id=TaskId(str(position)),
                type=task_type,
                date=start + timedelta(days=offset_days),
                duration=duration,
                recommended_amount=amount,
                recommended_unit=unit,
            )
        )
    return tasks


def refresh_recommendations(
    tasks: TaskBatch,
    profile: LawnProfile,
    fertilizer: Fertilizer | None,
) -> None:
    """Recompute the stored recommendation of each task in place; dates and completion stay."""
    for task in tasks:
        task.set_recommendation(*_recommendation(task.type, profile, fertilizer))

from .task_details_calculator import TaskDetails, TaskDetailsCalculator
from .task_scheduler import TASK_PLAN, TaskBatch, derive_tasks, refresh_recommendations

__all__ = [
    "TASK_PLAN",
    "TaskBatch",
    "TaskDetails",
    "TaskDetailsCalculator",
    "derive_tasks",
    "refresh_recommendations",
]

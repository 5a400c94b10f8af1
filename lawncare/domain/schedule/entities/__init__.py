from .task import RECOMMENDED_UNITS, TASK_TYPES, RecommendedUnit, Task, TaskType

__all__ = ["RECOMMENDED_UNITS", "TASK_TYPES", "RecommendedUnit", "Task", "TaskType"]

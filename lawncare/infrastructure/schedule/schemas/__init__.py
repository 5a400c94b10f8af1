from .task_schemas import Task, TaskDetails, TasksResponse, TaskToggleResponse

__all__ = ["Task", "TaskDetails", "TaskToggleResponse", "TasksResponse"]

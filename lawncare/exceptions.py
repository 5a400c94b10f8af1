"""Custom exception hierarchy for the lawncare API."""


class LawnCareError(Exception):
    """Base exception for all lawncare API errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LawnCareError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class TaskNotFoundError(NotFoundError):
    """Task not found error."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class FertilizerNotFoundError(NotFoundError):
    """Fertilizer not found error."""

    def __init__(self, fertilizer_id: str | None = None) -> None:
        self.fertilizer_id = fertilizer_id
        if fertilizer_id is None:
            super().__init__("No fertilizer configured")
        else:
            super().__init__(f"Fertilizer with id {fertilizer_id} not found")


class InventoryItemNotFoundError(NotFoundError):
    """Inventory item not found error."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Inventory item with id {item_id} not found")


class ExpenseNotFoundError(NotFoundError):
    """Expense not found error."""

    def __init__(self, expense_id: str) -> None:
        self.expense_id = expense_id
        super().__init__(f"Expense with id {expense_id} not found")


class MediaLogNotFoundError(NotFoundError):
    """Media log not found error."""

    def __init__(self, log_id: str) -> None:
        self.log_id = log_id
        super().__init__(f"Media log with id {log_id} not found")


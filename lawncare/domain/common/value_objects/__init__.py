"""Common value objects shared across all domain modules."""

from .ids import ExpenseId, FertilizerId, InventoryItemId, MediaLogId, TaskId

__all__ = [
    "ExpenseId",
    "FertilizerId",
    "InventoryItemId",
    "MediaLogId",
    "TaskId",
]

from .expense import EXPENSE_TYPES, Expense, ExpenseType
from .inventory_item import (
    INVENTORY_CATEGORIES,
    INVENTORY_UNITS,
    InventoryCategory,
    InventoryItem,
    InventoryUnit,
)

__all__ = [
    "EXPENSE_TYPES",
    "INVENTORY_CATEGORIES",
    "INVENTORY_UNITS",
    "Expense",
    "ExpenseType",
    "InventoryCategory",
    "InventoryItem",
    "InventoryUnit",
]

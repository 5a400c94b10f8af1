from .expense_schemas import (
    Expense,
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpensesListResponse,
    ExpenseSummary,
    ExpenseUpdateRequest,
    LaborExpenseCreateRequest,
    MonthlyTotal,
)
from .inventory_schemas import (
    InventoryItem,
    InventoryItemResponse,
    InventoryItemWriteRequest,
    InventoryListResponse,
)

__all__ = [
    "Expense",
    "ExpenseCreateRequest",
    "ExpenseResponse",
    "ExpenseSummary",
    "ExpenseUpdateRequest",
    "ExpensesListResponse",
    "InventoryItem",
    "InventoryItemResponse",
    "InventoryItemWriteRequest",
    "InventoryListResponse",
    "LaborExpenseCreateRequest",
    "MonthlyTotal",
]

from .expense_summary_service import ExpenseSummary, ExpenseSummaryService, MonthlyTotal
from .labor_cost import labor_cost, task_labor_description, worker_labor_description

__all__ = [
    "ExpenseSummary",
    "ExpenseSummaryService",
    "MonthlyTotal",
    "labor_cost",
    "task_labor_description",
    "worker_labor_description",
]

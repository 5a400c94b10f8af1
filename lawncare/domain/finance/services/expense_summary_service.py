"""Domain service aggregating expenses for reporting."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from lawncare.domain.finance.entities import Expense


@dataclass(frozen=True)
class MonthlyTotal:
    """Total spending within one calendar month."""

    month: str  # YYYY-MM
    total: float


@dataclass(frozen=True)
class ExpenseSummary:
    """Overall and per-month spending."""

    total: float
    monthly: list[MonthlyTotal]


class ExpenseSummaryService:
    """Stateless domain service for expense totals."""

    @staticmethod
    def summarize(expenses: Iterable[Expense]) -> ExpenseSummary:
        """
        Sum expenses overall and per calendar month.

        Args:
            expenses: Expenses in any order

        Returns:
            ExpenseSummary with monthly totals in chronological order
        """
        by_month: dict[str, float] = defaultdict(float)
        total = 0.0
        for expense in expenses:
            by_month[expense.date.strftime("%Y-%m")] += expense.amount
            total += expense.amount

        monthly = [MonthlyTotal(month=month, total=by_month[month]) for month in sorted(by_month)]
        return ExpenseSummary(total=total, monthly=monthly)

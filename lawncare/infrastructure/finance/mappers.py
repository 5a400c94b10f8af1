"""Mappers for finance Domain ↔ API schema conversion."""

from lawncare.domain.common.value_objects import InventoryItemId
from lawncare.domain.finance.entities import Expense, InventoryItem
from lawncare.domain.finance.services import ExpenseSummary
from lawncare.infrastructure.finance import schemas


class InventoryItemMapper:
    """Mapper for InventoryItem."""

    def unit_cost(self, request: schemas.InventoryItemWriteRequest) -> float:
        """Cost per unit, derived from the total when only that was given."""
        if request.cost_per_unit is not None:
            return request.cost_per_unit
        assert request.total_cost is not None
        return InventoryItem.unit_cost_from_total(request.total_cost, request.stock_qty)

    def to_domain(
        self, item_id: str, request: schemas.InventoryItemWriteRequest
    ) -> InventoryItem:
        """Build the edited item; the store keeps the existing expense link."""
        return InventoryItem(
            id=InventoryItemId(item_id),
            name=request.name.strip(),
            category=request.category,
            stock_qty=request.stock_qty,
            unit=request.unit,
            cost_per_unit=self.unit_cost(request),
        )

    def to_schema(self, item: InventoryItem) -> schemas.InventoryItem:
        return schemas.InventoryItem(
            id=item.id.value,
            name=item.name,
            category=item.category,
            stock_qty=item.stock_qty,
            unit=item.unit,
            cost_per_unit=item.cost_per_unit,
            total_cost=item.total_cost,
            expense_id=item.expense_id.value if item.expense_id else None,
        )


class ExpenseMapper:
    """Mapper for Expense and ExpenseSummary."""

    def to_schema(self, expense: Expense) -> schemas.Expense:
        return schemas.Expense(
            id=expense.id.value,
            date=expense.date,
            amount=expense.amount,
            description=expense.description,
            type=expense.type,
        )

    def summary_to_schema(self, summary: ExpenseSummary) -> schemas.ExpenseSummary:
        return schemas.ExpenseSummary(
            total=summary.total,
            monthly=[
                schemas.MonthlyTotal(month=month.month, total=month.total)
                for month in summary.monthly
            ],
        )

"""Inventory item entity."""

from dataclasses import dataclass
from typing import Literal, get_args

from lawncare.domain.common.entity import Entity
from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import ExpenseId, InventoryItemId

InventoryCategory = Literal["Fertilizer", "Seed", "Pesticide", "Other"]
InventoryUnit = Literal["kg", "g", "L", "ml", "count"]

INVENTORY_CATEGORIES: tuple[str, ...] = get_args(InventoryCategory)
INVENTORY_UNITS: tuple[str, ...] = get_args(InventoryUnit)


@dataclass
class InventoryItem(Entity[InventoryItemId]):
    """
    A stocked lawn-care supply.

    Business Rules:
    - Name cannot be empty
    - Stock quantity and cost per unit are positive
    - expense_id, when set, points at the purchase expense of this item
    """

    id: InventoryItemId
    name: str
    category: InventoryCategory
    stock_qty: float
    unit: InventoryUnit
    cost_per_unit: float
    expense_id: ExpenseId | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Item name cannot be empty", field="name")
        if self.category not in INVENTORY_CATEGORIES:
            raise ValidationError("Unknown category", field="category", value=self.category)
        if self.unit not in INVENTORY_UNITS:
            raise ValidationError("Unknown unit", field="unit", value=self.unit)
        if self.stock_qty <= 0:
            raise ValidationError(
                "Stock quantity must be positive", field="stock_qty", value=self.stock_qty
            )
        if self.cost_per_unit <= 0:
            raise ValidationError(
                "Cost per unit must be positive", field="cost_per_unit", value=self.cost_per_unit
            )

    @property
    def total_cost(self) -> float:
        return self.stock_qty * self.cost_per_unit

    @property
    def has_purchase_expense(self) -> bool:
        return self.expense_id is not None

    def link_expense(self, expense_id: ExpenseId) -> None:
        self.expense_id = expense_id

    @staticmethod
    def unit_cost_from_total(total_cost: float, stock_qty: float) -> float:
        """
        Derive the cost per unit from what was paid for the whole purchase.

        Raises:
            ValidationError: If the total or the quantity is not positive
        """
        if total_cost <= 0:
            raise ValidationError(
                "Total cost must be positive", field="total_cost", value=total_cost
            )
        if stock_qty <= 0:
            raise ValidationError("Stock quantity must be positive", field="stock_qty", value=stock_qty)
        return total_cost / stock_qty

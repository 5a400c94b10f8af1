"""Expense entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, get_args

from lawncare.domain.common.entity import Entity
from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import ExpenseId

ExpenseType = Literal["inventory", "labor", "other"]

EXPENSE_TYPES: tuple[str, ...] = get_args(ExpenseType)


@dataclass
class Expense(Entity[ExpenseId]):
    """
    A dated spending record.

    Business Rules:
    - Amount is positive
    - Inventory expenses mirror the total cost and name of the item they were
      created for (kept in sync by the store)
    """

    id: ExpenseId
    date: datetime
    amount: float
    description: str
    type: ExpenseType

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.type not in EXPENSE_TYPES:
            raise ValidationError("Unknown expense type", field="type", value=self.type)
        if self.amount <= 0:
            raise ValidationError("Amount must be positive", field="amount", value=self.amount)

    def matches_purchase(self, amount: float, description: str) -> bool:
        """Check if the expense already reflects the given purchase."""
        return self.amount == amount and self.description == description

    def sync_purchase(self, amount: float, description: str) -> None:
        """
        Mirror the total cost and name of the linked inventory item.

        The date is left untouched so the expense keeps its place in the ledger.
        """
        if amount <= 0:
            raise ValidationError("Amount must be positive", field="amount", value=amount)
        self.amount = amount
        self.description = description

"""Finance module domain exceptions."""

from lawncare.domain.common.exceptions import BusinessRuleViolationError


class LinkedExpenseDeletionError(BusinessRuleViolationError):
    """Raised when deleting a purchase expense that an inventory item still points at."""

    def __init__(self, expense_id: str, item_id: str) -> None:
        super().__init__(
            "linked_expense_deletion",
            f"Expense {expense_id} belongs to inventory item {item_id}; "
            "delete the inventory item instead",
        )
        self.expense_id = expense_id
        self.item_id = item_id

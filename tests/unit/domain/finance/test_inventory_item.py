"""Tests for the InventoryItem and Expense entities."""

from datetime import UTC, datetime

import pytest

from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import ExpenseId, InventoryItemId
from lawncare.domain.finance.entities import Expense, InventoryItem


def _make_item(**overrides: object) -> InventoryItem:
    values: dict[str, object] = {
        "id": InventoryItemId("inv-1"),
        "name": "Seed",
        "category": "Seed",
        "stock_qty": 2,
        "unit": "kg",
        "cost_per_unit": 300,
    }
    values.update(overrides)
    return InventoryItem(**values)  # type: ignore[arg-type]


class TestInventoryItem:
    def test_total_cost(self) -> None:
        assert _make_item().total_cost == 600

    def test_link_expense(self) -> None:
        item = _make_item()
        assert not item.has_purchase_expense
        item.link_expense(ExpenseId("exp-1"))
        assert item.has_purchase_expense
        assert item.expense_id == ExpenseId("exp-1")

    def test_unit_cost_from_total(self) -> None:
        assert InventoryItem.unit_cost_from_total(2000, 5) == 400

    def test_unit_cost_from_total_rejects_zero_quantity(self) -> None:
        with pytest.raises(ValidationError, match="Stock quantity must be positive"):
            InventoryItem.unit_cost_from_total(2000, 0)

    def test_unit_cost_from_total_rejects_zero_total(self) -> None:
        with pytest.raises(ValidationError, match="Total cost must be positive"):
            InventoryItem.unit_cost_from_total(0, 5)

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("name", "", "name cannot be empty"),
            ("category", "Tools", "Unknown category"),
            ("unit", "lb", "Unknown unit"),
            ("stock_qty", 0, "Stock quantity must be positive"),
            ("cost_per_unit", -1, "Cost per unit must be positive"),
            ("cost_per_unit", 0, "Cost per unit must be positive"),
        ],
    )
    def test_rejects_invalid_fields(self, field: str, value: object, message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            _make_item(**{field: value})


class TestExpense:
    def _make_expense(self, amount: float = 600) -> Expense:
        return Expense(
            id=ExpenseId("exp-1"),
            date=datetime(2024, 5, 10, tzinfo=UTC),
            amount=amount,
            description="Seed",
            type="inventory",
        )

    def test_sync_purchase_keeps_date(self) -> None:
        expense = self._make_expense()
        expense.sync_purchase(900, "Premium seed")
        assert expense.amount == 900
        assert expense.description == "Premium seed"
        assert expense.date == datetime(2024, 5, 10, tzinfo=UTC)

    def test_matches_purchase(self) -> None:
        expense = self._make_expense()
        assert expense.matches_purchase(600, "Seed")
        assert not expense.matches_purchase(600, "Other seed")

    @pytest.mark.parametrize("amount", [0, -1])
    def test_rejects_non_positive_amount(self, amount: float) -> None:
        with pytest.raises(ValidationError, match="Amount must be positive"):
            self._make_expense(amount=amount)

    def test_sync_purchase_rejects_zero(self) -> None:
        expense = self._make_expense()
        with pytest.raises(ValidationError, match="Amount must be positive"):
            expense.sync_purchase(0, "Free seed")
        assert expense.amount == 600

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError, match="Unknown expense type"):
            Expense(
                id=ExpenseId("exp-1"),
                date=datetime(2024, 5, 10, tzinfo=UTC),
                amount=1,
                description="x",
                type="gift",  # type: ignore[arg-type]
            )

"""Pydantic schemas for inventory endpoints."""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from lawncare.domain.finance.entities import InventoryCategory, InventoryUnit


class InventoryItemBase(BaseModel):
    """Base schema for InventoryItem."""

    name: str = Field(..., min_length=1, description="Item name")
    category: InventoryCategory = Field("Other", description="Item category")
    stock_qty: float = Field(..., gt=0, description="Quantity in stock")
    unit: InventoryUnit = Field("kg", description="Unit of the quantity")


class InventoryItemWriteRequest(InventoryItemBase):
    """
    Schema for creating or editing an inventory item.

    The price is given either per unit or as the total paid for the whole
    quantity, in which case the unit cost is derived from it.
    """

    cost_per_unit: float | None = Field(None, gt=0, description="Price per unit")
    total_cost: float | None = Field(None, gt=0, description="Total price paid")

    @model_validator(mode="after")
    def validate_price(self) -> Self:
        """Require exactly one way of pricing the item."""
        if (self.cost_per_unit is None) == (self.total_cost is None):
            msg = "Provide exactly one of cost_per_unit or total_cost"
            raise ValueError(msg)
        return self


class InventoryItem(InventoryItemBase):
    """Schema for InventoryItem response."""

    id: str
    cost_per_unit: float
    total_cost: float
    expense_id: str | None = Field(None, description="Purchase expense linked to the item")


class InventoryItemResponse(BaseModel):
    """Schema for inventory create/update responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    item: InventoryItem


class InventoryListResponse(BaseModel):
    """Schema for list of inventory items response."""

    items: list[InventoryItem]

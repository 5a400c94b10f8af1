"""Pydantic schemas for expense endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from lawncare.domain.finance.entities import ExpenseType
from lawncare.domain.profile.entities import Worker


class Expense(BaseModel):
    """Schema for Expense response."""

    id: str
    date: datetime
    amount: float
    description: str
    type: ExpenseType


class ExpenseCreateRequest(BaseModel):
    """
    Schema for recording an expense directly.

    Inventory expenses are only created through inventory purchases.
    """

    amount: float = Field(..., gt=0, description="Amount spent")
    description: str = Field(..., min_length=1, description="What the money was spent on")
    type: Literal["labor", "other"] = Field("other", description="Expense type")


class LaborExpenseCreateRequest(BaseModel):
    """Schema for recording labor priced at a household member's wage."""

    worker: Worker = Field(..., description="Who did the work")
    minutes: float = Field(..., gt=0, description="Time worked in minutes")


class ExpenseUpdateRequest(BaseModel):
    """Schema for editing an expense."""

    amount: float = Field(..., gt=0, description="Amount spent")
    description: str = Field(..., min_length=1, description="What the money was spent on")


class ExpenseResponse(BaseModel):
    """Schema for expense create/update responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    expense: Expense


class ExpensesListResponse(BaseModel):
    """Schema for list of expenses response, newest first."""

    expenses: list[Expense]


class MonthlyTotal(BaseModel):
    """Schema for the spending within one month."""

    month: str = Field(..., description="Month as YYYY-MM")
    total: float


class ExpenseSummary(BaseModel):
    """Schema for overall and monthly spending."""

    total: float
    monthly: list[MonthlyTotal]

"""API routes for expenses."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.domain.common.exceptions import DomainError
from lawncare.domain.common.value_objects import ExpenseId
from lawncare.exceptions import ExpenseNotFoundError, LawnCareError
from lawncare.infrastructure.common.di import get_lawn_care_store
from lawncare.infrastructure.common.schemas import SuccessResponse
from lawncare.infrastructure.finance.mappers import ExpenseMapper
from lawncare.infrastructure.finance.schemas import (
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpensesListResponse,
    ExpenseSummary,
    ExpenseUpdateRequest,
    LaborExpenseCreateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])

mapper = ExpenseMapper()


def _expense_response(store: LawnCareStore, expense_id: ExpenseId, message: str) -> ExpenseResponse:
    expense = store.get_expense(expense_id)
    if expense is None:
        raise ExpenseNotFoundError(expense_id.value)
    return ExpenseResponse(success=True, message=message, expense=mapper.to_schema(expense))


@router.get("", response_model=ExpensesListResponse, status_code=status.HTTP_200_OK)
def list_expenses(store: LawnCareStore = Depends(get_lawn_care_store)) -> ExpensesListResponse:
    """List expenses, newest first."""
    return ExpensesListResponse(
        expenses=[mapper.to_schema(expense) for expense in store.list_expenses()]
    )


@router.get("/summary", response_model=ExpenseSummary, status_code=status.HTTP_200_OK)
def get_expense_summary(store: LawnCareStore = Depends(get_lawn_care_store)) -> ExpenseSummary:
    """Total spending overall and per month, months in chronological order."""
    return mapper.summary_to_schema(store.summarize_expenses())


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def add_expense(
    request: ExpenseCreateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> ExpenseResponse:
    """Record an expense dated now."""
    expense_id = store.add_expense(
        amount=request.amount,
        description=request.description.strip(),
        expense_type=request.type,
    )
    return _expense_response(store, expense_id, "Expense added successfully")


@router.post("/labor", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def add_labor_expense(
    request: LaborExpenseCreateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> ExpenseResponse:
    """
    Record labor priced at the worker's hourly wage.

    Raises:
        ValidationError: If the resulting cost rounds to zero
    """
    expense_id = store.add_labor_expense(worker=request.worker, minutes=request.minutes)
    return _expense_response(store, expense_id, "Labor expense added successfully")


@router.put("/{expense_id}", response_model=ExpenseResponse, status_code=status.HTTP_200_OK)
def update_expense(
    expense_id: str,
    request: ExpenseUpdateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> ExpenseResponse:
    """
    Edit the amount and description of an expense.

    Purchase expenses of inventory items can be edited as well; the item is
    left as is, and editing the item later resets the expense to its total.

    Raises:
        ExpenseNotFoundError: If the expense does not exist
        HTTPException: If the update fails unexpectedly
    """
    try:
        expense = store.get_expense(ExpenseId(expense_id))
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        expense.amount = request.amount
        expense.description = request.description.strip()
        if not store.update_expense(expense):
            raise ExpenseNotFoundError(expense_id)
        return _expense_response(store, expense.id, "Expense updated successfully")
    except (LawnCareError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update expense {expense_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{expense_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_expense(
    expense_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> SuccessResponse:
    """
    Delete an expense.

    Purchase expenses of existing inventory items are refused (409); delete
    the item instead.

    Raises:
        ExpenseNotFoundError: If the expense does not exist
    """
    if not store.delete_expense(ExpenseId(expense_id)):
        raise ExpenseNotFoundError(expense_id)
    return SuccessResponse(success=True, message="Expense deleted successfully")

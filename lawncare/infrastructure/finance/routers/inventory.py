"""API routes for inventory management."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.domain.common.exceptions import DomainError
from lawncare.domain.common.value_objects import InventoryItemId
from lawncare.exceptions import InventoryItemNotFoundError, LawnCareError
from lawncare.infrastructure.common.di import get_lawn_care_store
from lawncare.infrastructure.common.schemas import SuccessResponse
from lawncare.infrastructure.finance.mappers import InventoryItemMapper
from lawncare.infrastructure.finance.schemas import (
    InventoryItem,
    InventoryItemResponse,
    InventoryItemWriteRequest,
    InventoryListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inventory", tags=["inventory"])

mapper = InventoryItemMapper()


@router.get("", response_model=InventoryListResponse, status_code=status.HTTP_200_OK)
def list_inventory(store: LawnCareStore = Depends(get_lawn_care_store)) -> InventoryListResponse:
    """List inventory items, most recently added first."""
    return InventoryListResponse(items=[mapper.to_schema(item) for item in store.list_inventory()])


@router.get("/{item_id}", response_model=InventoryItem, status_code=status.HTTP_200_OK)
def get_inventory_item(
    item_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> InventoryItem:
    """
    Get a single inventory item.

    Raises:
        InventoryItemNotFoundError: If the item does not exist
    """
    item = store.get_inventory_item(InventoryItemId(item_id))
    if item is None:
        raise InventoryItemNotFoundError(item_id)
    return mapper.to_schema(item)


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def add_inventory_item(
    request: InventoryItemWriteRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> InventoryItemResponse:
    """
    Record a purchase: adds the item and its inventory expense.

    Args:
        request: Item data, priced per unit or by total cost
        store: Lawn care store injected via dependency container

    Returns:
        The created item, linked to its purchase expense

    Raises:
        HTTPException: If the purchase cannot be recorded
    """
    try:
        item_id = store.add_inventory_item(
            name=request.name.strip(),
            stock_qty=request.stock_qty,
            unit=request.unit,
            cost_per_unit=mapper.unit_cost(request),
            category=request.category,
        )
        item = store.get_inventory_item(item_id)
        assert item is not None
        return InventoryItemResponse(
            success=True,
            message="Inventory item added successfully",
            item=mapper.to_schema(item),
        )
    except (LawnCareError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add inventory item: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{item_id}", response_model=InventoryItemResponse, status_code=status.HTTP_200_OK)
def update_inventory_item(
    item_id: str,
    request: InventoryItemWriteRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> InventoryItemResponse:
    """
    Edit an inventory item; its purchase expense follows the new total and name.

    Raises:
        InventoryItemNotFoundError: If the item does not exist
        HTTPException: If the update fails unexpectedly
    """
    try:
        if not store.update_inventory_item(mapper.to_domain(item_id, request)):
            raise InventoryItemNotFoundError(item_id)
        item = store.get_inventory_item(InventoryItemId(item_id))
        assert item is not None
        return InventoryItemResponse(
            success=True,
            message="Inventory item updated successfully",
            item=mapper.to_schema(item),
        )
    except (LawnCareError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update inventory item {item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{item_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_inventory_item(
    item_id: str,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> SuccessResponse:
    """
    Delete an inventory item together with its purchase expense.

    Raises:
        InventoryItemNotFoundError: If the item does not exist
    """
    if not store.delete_inventory_item(InventoryItemId(item_id)):
        raise InventoryItemNotFoundError(item_id)
    return SuccessResponse(success=True, message="Inventory item deleted successfully")

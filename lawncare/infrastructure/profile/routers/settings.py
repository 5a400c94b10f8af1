"""API routes for the lawn profile, fertilizer and wages."""

from fastapi import APIRouter, Depends
from starlette import status

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.exceptions import FertilizerNotFoundError
from lawncare.infrastructure.common.di import get_lawn_care_store
from lawncare.infrastructure.profile.mappers import ProfileMapper
from lawncare.infrastructure.profile.schemas import (
    Fertilizer,
    FertilizerUpdateRequest,
    LawnProfile,
    LawnProfileUpdateRequest,
    Wages,
)

router = APIRouter(tags=["settings"])

mapper = ProfileMapper()


@router.get("/profile", response_model=LawnProfile, status_code=status.HTTP_200_OK)
def get_profile(store: LawnCareStore = Depends(get_lawn_care_store)) -> LawnProfile:
    """Get the current lawn profile."""
    return mapper.profile_to_schema(store.get_profile())


@router.patch("/profile", response_model=LawnProfile, status_code=status.HTTP_200_OK)
def update_profile(
    request: LawnProfileUpdateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> LawnProfile:
    """
    Merge the given fields into the lawn profile.

    Tasks keep their schedule; POST /tasks/reschedule re-derives them.
    """
    profile = store.update_profile(**request.model_dump(exclude_unset=True, exclude_none=True))
    return mapper.profile_to_schema(profile)


@router.get("/fertilizer", response_model=Fertilizer, status_code=status.HTTP_200_OK)
def get_fertilizer(store: LawnCareStore = Depends(get_lawn_care_store)) -> Fertilizer:
    """
    Get the active fertilizer.

    Raises:
        FertilizerNotFoundError: If no fertilizer is configured
    """
    fertilizer = store.get_fertilizer()
    if fertilizer is None:
        raise FertilizerNotFoundError()
    return mapper.fertilizer_to_schema(fertilizer)


@router.put("/fertilizer", response_model=Fertilizer, status_code=status.HTTP_200_OK)
def update_fertilizer(
    request: FertilizerUpdateRequest,
    store: LawnCareStore = Depends(get_lawn_care_store),
) -> Fertilizer:
    """
    Replace the active fertilizer.

    Raises:
        FertilizerNotFoundError: If the id is not the active fertilizer's
    """
    fertilizer = mapper.fertilizer_to_domain(request)
    if not store.update_fertilizer(fertilizer):
        raise FertilizerNotFoundError(request.id)
    return mapper.fertilizer_to_schema(fertilizer)


@router.get("/wages", response_model=Wages, status_code=status.HTTP_200_OK)
def get_wages(store: LawnCareStore = Depends(get_lawn_care_store)) -> Wages:
    """Get the hourly wages used for labor costs."""
    return mapper.wages_to_schema(store.get_wages())


@router.put("/wages", response_model=Wages, status_code=status.HTTP_200_OK)
def update_wages(request: Wages, store: LawnCareStore = Depends(get_lawn_care_store)) -> Wages:
    """Replace all hourly wages."""
    wages = mapper.wages_to_domain(request)
    store.update_wages(wages)
    return mapper.wages_to_schema(wages)

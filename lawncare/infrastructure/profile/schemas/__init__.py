from .profile_schemas import (
    Fertilizer,
    FertilizerUpdateRequest,
    LawnProfile,
    LawnProfileUpdateRequest,
    Wages,
)

__all__ = [
    "Fertilizer",
    "FertilizerUpdateRequest",
    "LawnProfile",
    "LawnProfileUpdateRequest",
    "Wages",
]

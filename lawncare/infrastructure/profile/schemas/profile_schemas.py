"""Pydantic schemas for the lawn profile, fertilizer and wages endpoints."""

from pydantic import BaseModel, Field

from lawncare.domain.profile.entities import GrassType, MowerType


class LawnProfile(BaseModel):
    """Schema for the lawn profile response."""

    area: float = Field(..., description="Lawn area in square meters")
    grass_type: GrassType
    target_height: float = Field(..., description="Target cut height in millimeters")
    mower_type: MowerType
    irrigation_rate: float = Field(..., description="Sprinkler output in liters per minute")


class LawnProfileUpdateRequest(BaseModel):
    """Schema for a partial profile update; omitted fields are left unchanged."""

    area: float | None = Field(None, gt=0, description="Lawn area in square meters")
    grass_type: GrassType | None = None
    target_height: float | None = Field(None, gt=0, description="Target cut height in mm")
    mower_type: MowerType | None = None
    irrigation_rate: float | None = Field(None, gt=0, description="Liters per minute")


class Fertilizer(BaseModel):
    """Schema for the active fertilizer."""

    id: str
    name: str
    nitrogen_percentage: float


class FertilizerUpdateRequest(BaseModel):
    """Schema for replacing the active fertilizer."""

    id: str = Field(..., min_length=1, description="Id of the fertilizer being replaced")
    name: str = Field(..., min_length=1, description="Product name")
    nitrogen_percentage: float = Field(..., ge=0, le=100, description="Nitrogen content, N%")


class Wages(BaseModel):
    """Schema for hourly wages, used for both reads and full replacement."""

    father: float = Field(..., ge=0, description="Hourly wage")
    mother: float = Field(..., ge=0, description="Hourly wage")
    child: float = Field(..., ge=0, description="Hourly wage")

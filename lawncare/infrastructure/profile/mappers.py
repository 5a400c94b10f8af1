"""Mappers for profile Domain ↔ API schema conversion."""

from lawncare.domain.common.value_objects import FertilizerId
from lawncare.domain.profile.entities import Fertilizer, LawnProfile, Wages
from lawncare.infrastructure.profile import schemas


class ProfileMapper:
    """Mapper for LawnProfile, Fertilizer and Wages."""

    def profile_to_schema(self, profile: LawnProfile) -> schemas.LawnProfile:
        return schemas.LawnProfile(
            area=profile.area,
            grass_type=profile.grass_type,
            target_height=profile.target_height,
            mower_type=profile.mower_type,
            irrigation_rate=profile.irrigation_rate,
        )

    def fertilizer_to_schema(self, fertilizer: Fertilizer) -> schemas.Fertilizer:
        return schemas.Fertilizer(
            id=fertilizer.id.value,
            name=fertilizer.name,
            nitrogen_percentage=fertilizer.nitrogen_percentage,
        )

    def fertilizer_to_domain(self, request: schemas.FertilizerUpdateRequest) -> Fertilizer:
        return Fertilizer(
            id=FertilizerId(request.id),
            name=request.name.strip(),
            nitrogen_percentage=request.nitrogen_percentage,
        )

    def wages_to_schema(self, wages: Wages) -> schemas.Wages:
        return schemas.Wages(father=wages.father, mother=wages.mother, child=wages.child)

    def wages_to_domain(self, request: schemas.Wages) -> Wages:
        return Wages(father=request.father, mother=request.mother, child=request.child)

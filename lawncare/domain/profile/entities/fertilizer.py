"""Fertilizer entity."""

from dataclasses import dataclass

from lawncare.domain.common.entity import Entity
from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import FertilizerId


@dataclass
class Fertilizer(Entity[FertilizerId]):
    """
    The fertilizer used for fertilizing recommendations.

    Business Rules:
    - Name cannot be empty
    - Nitrogen percentage lies within 0-100
    """

    id: FertilizerId
    name: str
    nitrogen_percentage: float

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Fertilizer name cannot be empty", field="name")
        if not 0 <= self.nitrogen_percentage <= 100:
            raise ValidationError(
                "Nitrogen percentage must be between 0 and 100",
                field="nitrogen_percentage",
                value=self.nitrogen_percentage,
            )

    @property
    def nitrogen_fraction(self) -> float:
        return self.nitrogen_percentage / 100

    @classmethod
    def default(cls) -> "Fertilizer":
        return cls(id=FertilizerId("fert1"), name="Standard lawn fertilizer", nitrogen_percentage=10)

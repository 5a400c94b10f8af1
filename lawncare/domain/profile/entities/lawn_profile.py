"""LawnProfile value object: the care profile driving every recommendation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal, get_args

from lawncare.domain.common.exceptions import ValidationError

if TYPE_CHECKING:
    from typing import Self

GrassType = Literal["Bermuda", "Zoysia", "StAugustine", "Fescue"]
MowerType = Literal["Rotary", "Reel"]

GRASS_TYPES: tuple[str, ...] = get_args(GrassType)
MOWER_TYPES: tuple[str, ...] = get_args(MowerType)


@dataclass(frozen=True)
class LawnProfile:
    """
    User-editable lawn configuration.

    Attributes:
        area: Lawn area in square meters
        grass_type: Grass variety
        target_height: Target cut height in millimeters
        mower_type: Rotary or reel mower
        irrigation_rate: Sprinkler output in liters per minute

    Only the enumerated fields are checked here. Positivity of the numeric
    fields is enforced by the request schemas, and the formulas that divide
    by them degrade to an unavailable result instead of failing.
    """

    area: float
    grass_type: GrassType
    target_height: float
    mower_type: MowerType
    irrigation_rate: float

    def __post_init__(self) -> None:
        if self.grass_type not in GRASS_TYPES:
            raise ValidationError("Unknown grass type", field="grass_type", value=self.grass_type)
        if self.mower_type not in MOWER_TYPES:
            raise ValidationError("Unknown mower type", field="mower_type", value=self.mower_type)

    def merge(self, **changes: object) -> Self:
        """
        Return a copy with the given fields replaced.

        Raises:
            ValidationError: If a field name is not part of the profile
        """
        unknown = set(changes) - set(self.__dataclass_fields__)
        if unknown:
            raise ValidationError("Unknown profile field", field=", ".join(sorted(unknown)))
        return replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def default(cls) -> Self:
        """Profile used until the user edits it."""
        return cls(
            area=50,
            grass_type="Bermuda",
            target_height=25,
            mower_type="Rotary",
            irrigation_rate=15,
        )

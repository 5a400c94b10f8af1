"""Hourly wages of the household members doing lawn work."""

from dataclasses import dataclass
from typing import Literal, get_args

from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_object import ValueObject

Worker = Literal["father", "mother", "child"]

WORKERS: tuple[str, ...] = get_args(Worker)


@dataclass(frozen=True)
class Wages(ValueObject):
    """Hourly rate per worker, in currency units per hour."""

    father: float
    mother: float
    child: float

    def __post_init__(self) -> None:
        for worker in WORKERS:
            if getattr(self, worker) < 0:
                raise ValidationError(
                    "Hourly wage cannot be negative", field=worker, value=getattr(self, worker)
                )

    def rate_for(self, worker: Worker) -> float:
        """Hourly rate of the given worker."""
        if worker not in WORKERS:
            raise ValidationError("Unknown worker", field="worker", value=worker)
        return float(getattr(self, worker))

    @classmethod
    def default(cls) -> "Wages":
        return cls(father=1500, mother=1200, child=500)

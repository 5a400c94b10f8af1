"""Domain service computing recommended amounts for care tasks."""

from dataclasses import dataclass

from lawncare.domain.common.rounding import round_half_up
from lawncare.domain.profile.entities import Fertilizer, LawnProfile
from lawncare.domain.schedule.entities import Task, TaskType

# 10 mm of water over one square meter is 10 liters
WATER_LITERS_PER_M2 = 10
NITROGEN_GRAMS_PER_M2 = 2


@dataclass(frozen=True)
class TaskDetails:
    """
    Recommended amount for a task.

    Attributes:
        amount: Recommended quantity, None when no recommendation is available
        unit: Unit of the amount ("mm", "min" or "g"), None without an amount
        description: Human readable explanation of the amount
    """

    amount: float | None
    unit: str | None
    description: str

    @property
    def available(self) -> bool:
        return self.amount is not None

    @classmethod
    def unavailable(cls, description: str) -> "TaskDetails":
        return cls(amount=None, unit=None, description=description)

    @classmethod
    def empty(cls) -> "TaskDetails":
        return cls(amount=None, unit=None, description="")


class TaskDetailsCalculator:
    """Stateless domain service for task recommendations."""

    @staticmethod
    def details_for(
        task_type: TaskType,
        profile: LawnProfile,
        fertilizer: Fertilizer | None,
    ) -> TaskDetails:
        """
        Compute the recommendation for a task type.

        Args:
            task_type: Type of the task
            profile: Current lawn profile
            fertilizer: Active fertilizer, if one is configured

        Returns:
            TaskDetails; unavailable when the formula cannot be evaluated,
            empty for task types without a formula (Aeration, Topdressing)
        """
        if task_type == "Mowing":
            return TaskDetails(
                amount=profile.target_height, unit="mm", description="Target cut height"
            )

        if task_type == "Watering":
            if profile.irrigation_rate <= 0:
                return TaskDetails.unavailable("Irrigation rate is not configured")
            required_liters = WATER_LITERS_PER_M2 * profile.area
            minutes = round_half_up(required_liters / profile.irrigation_rate)
            return TaskDetails(
                amount=minutes, unit="min", description=f"About {required_liters:g} L of water"
            )

        if task_type == "Fertilizing":
            if fertilizer is None or fertilizer.nitrogen_percentage <= 0:
                return TaskDetails.unavailable("No fertilizer configured")
            nitrogen_grams = NITROGEN_GRAMS_PER_M2 * profile.area
            grams = round_half_up(nitrogen_grams / fertilizer.nitrogen_fraction)
            return TaskDetails(amount=grams, unit="g", description=f"Using {fertilizer.name}")

        # TODO: Aeration and Topdressing have no recommendation formula yet.
        return TaskDetails.empty()

    def get_task_details(
        self,
        task: Task,
        profile: LawnProfile,
        fertilizer: Fertilizer | None,
    ) -> TaskDetails:
        """Compute the recommendation for a scheduled task."""
        return self.details_for(task.type, profile, fertilizer)

"""Labor cost of lawn work, priced at a worker's hourly wage."""

from lawncare.domain.common.rounding import round_half_up


def labor_cost(minutes: float, hourly_rate: float) -> int:
    """Cost of the given minutes of work, rounded half up to a whole amount."""
    return round_half_up(minutes / 60 * hourly_rate)


def task_labor_description(task_type: str, minutes: float) -> str:
    return f"Labor: {task_type} ({minutes:g} min)"


def worker_labor_description(worker: str, minutes: float) -> str:
    return f"Labor: {worker} ({minutes:g} min)"

from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class FertilizerId(EntityId):
    """Strongly-typed fertilizer identifier."""

    value: str


@dataclass(frozen=True)
class InventoryItemId(EntityId):
    """Strongly-typed inventory item identifier."""

    value: str


@dataclass(frozen=True)
class TaskId(EntityId):
    """Strongly-typed care task identifier."""

    value: str


@dataclass(frozen=True)
class ExpenseId(EntityId):
    """Strongly-typed expense identifier."""

    value: str


@dataclass(frozen=True)
class MediaLogId(EntityId):
    """Strongly-typed media log identifier."""

    value: str

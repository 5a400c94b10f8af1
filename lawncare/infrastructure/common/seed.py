"""
Demo data for a fresh store.

Two stocked items with their purchase expenses, a sharpening expense and
two media logs, so the API has something to show on first start.
"""

from datetime import UTC, datetime, timedelta

import structlog

from lawncare.application.lawn_care.lawn_care_store import LawnCareStore
from lawncare.application.lawn_care.protocols import ClockProtocol, IdGeneratorProtocol
from lawncare.domain.common.value_objects import ExpenseId, InventoryItemId, MediaLogId
from lawncare.domain.finance.entities import Expense, InventoryItem
from lawncare.domain.journal.entities import MediaLog
from lawncare.domain.profile.entities import Fertilizer

logger = structlog.get_logger(__name__)

_HEALTHY_LAWN_SVG = (
    "data:image/svg+xml;utf8,"
    "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 40 20'>"
    "<rect width='40' height='20' fill='%232af02c'/></svg>"
)
_DRY_SPOT_SVG = (
    "data:image/svg+xml;utf8,"
    "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 40 20'>"
    "<rect width='40' height='20' fill='%23b39e7a'/></svg>"
)


def demo_expenses() -> list[Expense]:
    return [
        Expense(
            id=ExpenseId("exp1"),
            date=datetime(2023, 7, 1, tzinfo=UTC),
            amount=5000,
            description="Mower blade sharpening",
            type="other",
        ),
        Expense(
            id=ExpenseId("exp2"),
            date=datetime(2023, 6, 20, tzinfo=UTC),
            amount=1500,
            description="Lawn seed mix",
            type="inventory",
        ),
        Expense(
            id=ExpenseId("exp3"),
            date=datetime(2023, 5, 15, tzinfo=UTC),
            amount=2000,
            description="Standard lawn fertilizer",
            type="inventory",
        ),
    ]


def demo_inventory() -> list[InventoryItem]:
    return [
        InventoryItem(
            id=InventoryItemId("inv1"),
            name="Standard lawn fertilizer",
            category="Fertilizer",
            stock_qty=5,
            unit="kg",
            cost_per_unit=400,
            expense_id=ExpenseId("exp3"),
        ),
        InventoryItem(
            id=InventoryItemId("inv2"),
            name="Lawn seed mix",
            category="Seed",
            stock_qty=1,
            unit="kg",
            cost_per_unit=1500,
            expense_id=ExpenseId("exp2"),
        ),
    ]


def demo_media_logs(now: datetime) -> list[MediaLog]:
    return [
        MediaLog(
            id=MediaLogId("pl1"),
            date=now - timedelta(days=5),
            media_url=_HEALTHY_LAWN_SVG,
            media_type="image",
            note="Lush and green after fertilizing.",
            tags=["healthy", "growth"],
        ),
        MediaLog(
            id=MediaLogId("pl2"),
            date=now - timedelta(days=1),
            media_url=_DRY_SPOT_SVG,
            media_type="image",
            note="Found a dry brown patch near the oak tree. Might need more water here.",
            tags=["problem", "dry", "watering"],
        ),
    ]


def create_lawn_care_store(
    clock: ClockProtocol,
    id_generator: IdGeneratorProtocol,
    seed_demo_data: bool = False,
) -> LawnCareStore:
    """
    Build a store with the default profile, fertilizer and wages.

    Args:
        clock: Time source
        id_generator: Id source
        seed_demo_data: Load the demo inventory, expenses and media logs

    Returns:
        Ready to use LawnCareStore
    """
    store = LawnCareStore(clock, id_generator, fertilizer=Fertilizer.default())
    if seed_demo_data:
        store.restore(
            inventory=demo_inventory(),
            expenses=demo_expenses(),
            media_logs=demo_media_logs(clock.now()),
        )
        logger.info("demo_data_seeded")
    return store

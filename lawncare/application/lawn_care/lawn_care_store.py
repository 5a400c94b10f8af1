"""In-memory store holding all lawn care state and enforcing its cross-entity rules."""

import copy
import threading
from collections.abc import Iterable
from datetime import date

import structlog

from lawncare.application.lawn_care.protocols import ClockProtocol, IdGeneratorProtocol
from lawncare.domain.common.exceptions import ValidationError
from lawncare.domain.common.value_objects import (
    ExpenseId,
    InventoryItemId,
    MediaLogId,
    TaskId,
)
from lawncare.domain.finance.entities import (
    Expense,
    ExpenseType,
    InventoryCategory,
    InventoryItem,
    InventoryUnit,
)
from lawncare.domain.finance.exceptions import LinkedExpenseDeletionError
from lawncare.domain.finance.services import (
    ExpenseSummary,
    ExpenseSummaryService,
    labor_cost,
    task_labor_description,
    worker_labor_description,
)
from lawncare.domain.journal.entities import MediaLog, MediaType
from lawncare.domain.profile.entities import Fertilizer, LawnProfile, Wages, Worker
from lawncare.domain.schedule.entities import Task
from lawncare.domain.schedule.services import (
    TaskDetails,
    TaskDetailsCalculator,
    derive_tasks,
    refresh_recommendations,
)

logger = structlog.get_logger(__name__)


class LawnCareStore:
    """
    Aggregate of the lawn profile, fertilizer, wages, tasks, inventory,
    expenses and media logs.

    Every command completes within a single call while holding the store
    lock, so readers never see half of a multi-entity update (an inventory
    item without its purchase expense, a completed task without its labor
    cost). Queries return copies; changing them never changes the store.

    Commands targeting an unknown id are no-ops and return False.
    """

    def __init__(
        self,
        clock: ClockProtocol,
        id_generator: IdGeneratorProtocol,
        *,
        profile: LawnProfile | None = None,
        fertilizer: Fertilizer | None = None,
        wages: Wages | None = None,
    ) -> None:
        """
        Initialize the store and derive the first task batch.

        Args:
            clock: Source of creation dates
            id_generator: Source of entity ids
            profile: Initial lawn profile, LawnProfile.default() if omitted
            fertilizer: Active fertilizer, None when none is configured
            wages: Initial wages, Wages.default() if omitted
        """
        self._clock = clock
        self._ids = id_generator
        self._lock = threading.RLock()
        self._details_calculator = TaskDetailsCalculator()

        self._profile = profile or LawnProfile.default()
        self._fertilizer = copy.deepcopy(fertilizer)
        self._wages = wages or Wages.default()
        self._inventory: list[InventoryItem] = []
        self._expenses: list[Expense] = []
        self._media_logs: list[MediaLog] = []
        self._tasks: list[Task] = derive_tasks(self._profile, self._fertilizer, clock.now())

    # Profile, fertilizer and wages

    def get_profile(self) -> LawnProfile:
        return self._profile

    def update_profile(self, **changes: object) -> LawnProfile:
        """
        Merge the given fields into the lawn profile.

        Tasks keep their dates and completion state; their recommended
        amounts follow the new profile. reschedule_tasks() re-derives the batch.

        Raises:
            ValidationError: If a field is unknown or has an invalid value
        """
        with self._lock:
            self._profile = self._profile.merge(**changes)
            refresh_recommendations(self._tasks, self._profile, self._fertilizer)
            logger.info("profile_updated", fields=sorted(changes))
            return self._profile

    def get_fertilizer(self) -> Fertilizer | None:
        with self._lock:
            return copy.deepcopy(self._fertilizer)

    def update_fertilizer(self, fertilizer: Fertilizer) -> bool:
        """
        Replace the active fertilizer if the ids match.

        Returns:
            True if replaced, False if the id is not the active fertilizer's
        """
        with self._lock:
            if self._fertilizer is None or self._fertilizer.id != fertilizer.id:
                logger.debug("fertilizer_not_found", fertilizer_id=str(fertilizer.id))
                return False
            self._fertilizer = copy.deepcopy(fertilizer)
            refresh_recommendations(self._tasks, self._profile, self._fertilizer)
            logger.info("fertilizer_updated", fertilizer_id=str(fertilizer.id))
            return True

    def get_wages(self) -> Wages:
        return self._wages

    def update_wages(self, wages: Wages) -> None:
        with self._lock:
            self._wages = wages
            logger.info("wages_updated")

    # Tasks

    def list_tasks(self) -> list[Task]:
        """All tasks ordered by date, earliest first."""
        with self._lock:
            return copy.deepcopy(sorted(self._tasks, key=lambda t: t.date))

    def list_tasks_on(self, day: date) -> list[Task]:
        """Tasks scheduled on the given calendar day."""
        return [task for task in self.list_tasks() if task.falls_on(day)]

    def get_task(self, task_id: TaskId) -> Task | None:
        with self._lock:
            task = self._find_task(task_id)
            return copy.deepcopy(task) if task else None

    def reschedule_tasks(self) -> list[Task]:
        """
        Replace the task batch with one derived from the current profile.

        Completion state of the previous batch is discarded; labor expenses
        already recorded for it are kept.
        """
        with self._lock:
            self._tasks = derive_tasks(self._profile, self._fertilizer, self._clock.now())
            logger.info("tasks_rescheduled", count=len(self._tasks))
            return copy.deepcopy(self._tasks)

    def get_task_details(self, task: Task) -> TaskDetails:
        """Recommended amount for a task under the current profile and fertilizer."""
        with self._lock:
            return self._details_calculator.get_task_details(task, self._profile, self._fertilizer)

    def list_tasks_with_details(self, day: date | None = None) -> list[tuple[Task, TaskDetails]]:
        """
        Tasks ordered by date, each paired with its recommendation.

        Tasks and details are read under one lock, so every pair reflects
        the same profile and fertilizer.

        Args:
            day: Only tasks scheduled on this calendar day, if given
        """
        with self._lock:
            tasks = [task for task in self.list_tasks() if day is None or task.falls_on(day)]
            return [(task, self.get_task_details(task)) for task in tasks]

    def get_task_with_details(self, task_id: TaskId) -> tuple[Task, TaskDetails] | None:
        with self._lock:
            task = self.get_task(task_id)
            return (task, self.get_task_details(task)) if task else None

    def toggle_task_completion(self, task_id: TaskId) -> bool:
        """
        Flip a task between incomplete and complete.

        Completing a task records its labor cost, priced at the father's wage,
        as a labor expense when the cost is positive. Reopening a task leaves
        that expense in place.

        Returns:
            True if toggled, False if the task does not exist
        """
        with self._lock:
            task = self._find_task(task_id)
            if task is None:
                logger.debug("task_not_found", task_id=str(task_id))
                return False

            if task.toggle_completion():
                cost = labor_cost(task.duration, self._wages.father)
                if cost > 0:
                    expense_id = self._add_expense(
                        amount=cost,
                        description=task_labor_description(task.type, task.duration),
                        expense_type="labor",
                    )
                    logger.info(
                        "labor_expense_recorded",
                        task_id=str(task_id),
                        expense_id=str(expense_id),
                        amount=cost,
                    )
            logger.info("task_toggled", task_id=str(task_id), completed=task.completed)
            return True

    # Media logs

    def list_media_logs(self, tag: str | None = None) -> list[MediaLog]:
        """Media logs, newest first, optionally only those carrying a tag."""
        with self._lock:
            logs = [log for log in self._media_logs if tag is None or log.has_tag(tag)]
            return copy.deepcopy(logs)

    def get_media_log(self, log_id: MediaLogId) -> MediaLog | None:
        with self._lock:
            log = self._find_media_log(log_id)
            return copy.deepcopy(log) if log else None

    def add_media_log(
        self,
        media_url: str,
        media_type: MediaType,
        note: str = "",
        tags: Iterable[str] = (),
    ) -> MediaLogId:
        """Create a media log dated now, not yet liked."""
        with self._lock:
            log = MediaLog(
                id=MediaLogId(self._ids.new_id("ml")),
                date=self._clock.now(),
                media_url=media_url,
                media_type=media_type,
                note=note,
                tags=list(tags),
            )
            self._media_logs.insert(0, log)
            logger.info("media_log_added", media_log_id=str(log.id), media_type=media_type)
            return log.id

    def update_media_log(self, log: MediaLog) -> bool:
        """Replace a media log by id."""
        with self._lock:
            index = self._index_of(self._media_logs, log.id)
            if index is None:
                logger.debug("media_log_not_found", media_log_id=str(log.id))
                return False
            self._media_logs[index] = copy.deepcopy(log)
            logger.info("media_log_updated", media_log_id=str(log.id))
            return True

    def delete_media_log(self, log_id: MediaLogId) -> bool:
        with self._lock:
            index = self._index_of(self._media_logs, log_id)
            if index is None:
                logger.debug("media_log_not_found", media_log_id=str(log_id))
                return False
            del self._media_logs[index]
            logger.info("media_log_deleted", media_log_id=str(log_id))
            return True

    def toggle_media_log_like(self, log_id: MediaLogId) -> bool:
        with self._lock:
            log = self._find_media_log(log_id)
            if log is None:
                logger.debug("media_log_not_found", media_log_id=str(log_id))
                return False
            liked = log.toggle_like()
            logger.info("media_log_like_toggled", media_log_id=str(log_id), liked=liked)
            return True

    # Inventory

    def list_inventory(self) -> list[InventoryItem]:
        """Inventory items, most recently added first."""
        with self._lock:
            return copy.deepcopy(self._inventory)

    def get_inventory_item(self, item_id: InventoryItemId) -> InventoryItem | None:
        with self._lock:
            item = self._find_inventory_item(item_id)
            return copy.deepcopy(item) if item else None

    def add_inventory_item(
        self,
        name: str,
        stock_qty: float,
        unit: InventoryUnit,
        cost_per_unit: float,
        category: InventoryCategory,
    ) -> InventoryItemId:
        """
        Add a purchased item together with its inventory expense.

        The item is validated before anything is recorded, so a rejected item
        never leaves an orphan expense behind.

        Raises:
            ValidationError: If the item data is invalid
        """
        with self._lock:
            item = InventoryItem(
                id=InventoryItemId(self._ids.new_id("inv")),
                name=name,
                category=category,
                stock_qty=stock_qty,
                unit=unit,
                cost_per_unit=cost_per_unit,
            )
            expense_id = self._add_expense(
                amount=item.total_cost, description=item.name, expense_type="inventory"
            )
            item.link_expense(expense_id)
            self._inventory.insert(0, item)
            logger.info(
                "inventory_item_added",
                item_id=str(item.id),
                expense_id=str(expense_id),
                total_cost=item.total_cost,
            )
            return item.id

    def update_inventory_item(self, item: InventoryItem) -> bool:
        """
        Replace an inventory item and keep its purchase expense in sync.

        The link to the purchase expense is owned by the store: the existing
        item's expense_id is kept whatever the incoming item carries.

        Returns:
            True if updated, False if the item does not exist
        """
        with self._lock:
            index = self._index_of(self._inventory, item.id)
            if index is None:
                logger.debug("inventory_item_not_found", item_id=str(item.id))
                return False

            existing = self._inventory[index]
            expense = self._find_expense(existing.expense_id) if existing.expense_id else None

            updated = copy.deepcopy(item)
            updated.expense_id = existing.expense_id
            self._inventory[index] = updated

            if expense is not None and not expense.matches_purchase(updated.total_cost, updated.name):
                expense.sync_purchase(updated.total_cost, updated.name)
                self._sort_expenses()
                logger.info(
                    "purchase_expense_synced",
                    item_id=str(item.id),
                    expense_id=str(expense.id),
                    amount=expense.amount,
                )
            logger.info("inventory_item_updated", item_id=str(item.id))
            return True

    def delete_inventory_item(self, item_id: InventoryItemId) -> bool:
        """Delete an inventory item and, first, its purchase expense."""
        with self._lock:
            index = self._index_of(self._inventory, item_id)
            if index is None:
                logger.debug("inventory_item_not_found", item_id=str(item_id))
                return False

            item = self._inventory[index]
            if item.expense_id is not None:
                self._remove_expense(item.expense_id)
            del self._inventory[index]
            logger.info(
                "inventory_item_deleted",
                item_id=str(item_id),
                expense_id=str(item.expense_id) if item.expense_id else None,
            )
            return True

    # Expenses

    def list_expenses(self) -> list[Expense]:
        """Expenses ordered by date, newest first."""
        with self._lock:
            return copy.deepcopy(self._expenses)

    def get_expense(self, expense_id: ExpenseId) -> Expense | None:
        with self._lock:
            expense = self._find_expense(expense_id)
            return copy.deepcopy(expense) if expense else None

    def summarize_expenses(self) -> ExpenseSummary:
        with self._lock:
            return ExpenseSummaryService.summarize(self._expenses)

    def add_expense(self, amount: float, description: str, expense_type: ExpenseType) -> ExpenseId:
        """
        Record an expense dated now.

        Returns:
            Id of the new expense
        """
        with self._lock:
            expense_id = self._add_expense(amount, description, expense_type)
            logger.info("expense_added", expense_id=str(expense_id), type=expense_type)
            return expense_id

    def add_labor_expense(self, worker: Worker, minutes: float) -> ExpenseId:
        """
        Record labor done by a household member, priced at their wage.

        Raises:
            ValidationError: If the resulting cost is not positive
        """
        with self._lock:
            cost = labor_cost(minutes, self._wages.rate_for(worker))
            if cost <= 0:
                raise ValidationError("Labor cost must be positive", field="minutes", value=minutes)
            expense_id = self._add_expense(
                amount=cost,
                description=worker_labor_description(worker, minutes),
                expense_type="labor",
            )
            logger.info(
                "labor_expense_recorded", expense_id=str(expense_id), worker=worker, amount=cost
            )
            return expense_id

    def update_expense(self, expense: Expense) -> bool:
        """
        Replace an expense by id and restore the date ordering.

        Purchase expenses may be edited too; the linked inventory item is not
        touched, and its next update syncs the expense back to the item total.
        """
        with self._lock:
            index = self._index_of(self._expenses, expense.id)
            if index is None:
                logger.debug("expense_not_found", expense_id=str(expense.id))
                return False
            self._expenses[index] = copy.deepcopy(expense)
            self._sort_expenses()
            logger.info("expense_updated", expense_id=str(expense.id))
            return True

    def delete_expense(self, expense_id: ExpenseId) -> bool:
        """
        Delete an expense.

        Raises:
            LinkedExpenseDeletionError: If an inventory item still points at
                the expense; deleting the item removes both
        """
        with self._lock:
            owner = next(
                (item for item in self._inventory if item.expense_id == expense_id), None
            )
            if owner is not None:
                raise LinkedExpenseDeletionError(str(expense_id), str(owner.id))
            removed = self._remove_expense(expense_id)
            if removed:
                logger.info("expense_deleted", expense_id=str(expense_id))
            else:
                logger.debug("expense_not_found", expense_id=str(expense_id))
            return removed

    # Bulk loading

    def restore(
        self,
        *,
        inventory: Iterable[InventoryItem] = (),
        expenses: Iterable[Expense] = (),
        media_logs: Iterable[MediaLog] = (),
    ) -> None:
        """
        Replace inventory, expenses and media logs with existing records.

        Raises:
            ValidationError: If an inventory item points at a missing expense
        """
        with self._lock:
            restored_expenses = copy.deepcopy(list(expenses))
            expense_ids = {expense.id for expense in restored_expenses}
            restored_inventory = copy.deepcopy(list(inventory))
            for item in restored_inventory:
                if item.expense_id is not None and item.expense_id not in expense_ids:
                    raise ValidationError(
                        "Inventory item points at a missing expense",
                        field="expense_id",
                        value=str(item.expense_id),
                    )

            self._inventory = restored_inventory
            self._expenses = restored_expenses
            self._media_logs = sorted(
                copy.deepcopy(list(media_logs)), key=lambda log: log.date, reverse=True
            )
            self._sort_expenses()
            logger.info(
                "store_restored",
                inventory=len(self._inventory),
                expenses=len(self._expenses),
                media_logs=len(self._media_logs),
            )

    # Internals, callers hold the lock

    def _add_expense(self, amount: float, description: str, expense_type: ExpenseType) -> ExpenseId:
        expense = Expense(
            id=ExpenseId(self._ids.new_id("exp")),
            date=self._clock.now(),
            amount=amount,
            description=description,
            type=expense_type,
        )
        self._expenses.insert(0, expense)
        self._sort_expenses()
        return expense.id

    def _remove_expense(self, expense_id: ExpenseId) -> bool:
        index = self._index_of(self._expenses, expense_id)
        if index is None:
            return False
        del self._expenses[index]
        return True

    def _sort_expenses(self) -> None:
        # list.sort is stable with reverse=True, so equal dates keep newest-added first
        self._expenses.sort(key=lambda expense: expense.date, reverse=True)

    def _find_task(self, task_id: TaskId) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    def _find_media_log(self, log_id: MediaLogId) -> MediaLog | None:
        return next((log for log in self._media_logs if log.id == log_id), None)

    def _find_inventory_item(self, item_id: InventoryItemId) -> InventoryItem | None:
        return next((item for item in self._inventory if item.id == item_id), None)

    def _find_expense(self, expense_id: ExpenseId) -> Expense | None:
        return next((expense for expense in self._expenses if expense.id == expense_id), None)

    @staticmethod
    def _index_of(entities: list, entity_id: object) -> int | None:
        return next((i for i, entity in enumerate(entities) if entity.id == entity_id), None)

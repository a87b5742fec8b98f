"""
Ledger Session Orchestrator

Ties the store, goal tracker, persistence and exporter together into one
session object for a host UI.

DESIGN DECISION: The orchestrator enforces the mutation protocol:
1. Validate input (ValidationError reaches the caller, nothing changes)
2. Apply the in-memory change in one step
3. Persist the full state of the touched key
4. If persisting fails, warn; the in-memory change is never rolled back

Every mutating call holds one lock, so a multi-threaded host cannot
observe a half-applied mutation.
"""

import asyncio
import threading
import warnings
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Union

from budget_tracker.config import LedgerSettings, get_settings
from budget_tracker.export import DocumentRenderer, PageSize, build_summary
from budget_tracker.ledger import (
    SavingsGoalTracker,
    TransactionStore,
    select,
    summarize,
)
from budget_tracker.logger import configure_logging, get_logger
from budget_tracker.models.document import DocumentModel
from budget_tracker.models.transaction import (
    KindFilter,
    KindSelector,
    LedgerTotals,
    SavingsGoal,
    Transaction,
)
from budget_tracker.services.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    PersistenceAdapter,
    PersistenceWarning,
    PersistenceWriteError,
)


logger = get_logger(__name__)


class BudgetTracker:
    """
    One budget session: transactions, savings goal, totals and export.

    State is loaded once from the persistence adapter at construction.
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        settings: Optional[LedgerSettings] = None,
    ):
        self._settings = settings or get_settings()
        self._persistence = persistence
        self._lock = threading.RLock()
        self.last_persistence_error: Optional[PersistenceWriteError] = None

        self._store = TransactionStore(persistence.load_transactions())
        self._goal = SavingsGoalTracker(persistence.load_goal())
        self._store.set_on_change(self._persist_transactions)
        self._goal.set_on_change(self._persist_goal)

        logger.info(
            "ledger_loaded",
            transaction_count=len(self._store),
            has_goal=self._goal.goal is not None,
        )

    # -------------------------------------------------------------------------
    # Persistence side effects
    # -------------------------------------------------------------------------

    def _report_write_failure(self, error: PersistenceWriteError) -> None:
        self.last_persistence_error = error
        logger.warning("persistence_write_failed", key=error.key, reason=error.reason)
        warnings.warn(str(error), PersistenceWarning, stacklevel=6)

    def _persist_transactions(self, store: TransactionStore) -> None:
        try:
            self._persistence.save_transactions(store.all())
        except PersistenceWriteError as e:
            self._report_write_failure(e)
        else:
            self.last_persistence_error = None

    def _persist_goal(self, tracker: SavingsGoalTracker) -> None:
        try:
            self._persistence.save_goal(tracker.goal)
        except PersistenceWriteError as e:
            self._report_write_failure(e)
        else:
            self.last_persistence_error = None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_transaction(self, description: Any, amount: Any, kind: Any) -> Transaction:
        """
        Record a transaction and persist the collection.

        Raises:
            ValidationError: If the input is invalid
        """
        with self._lock:
            return self._store.add(description, amount, kind)

    def remove_transaction(self, transaction_id: str) -> None:
        """Remove a transaction; unknown ids are a no-op."""
        with self._lock:
            self._store.remove(transaction_id)

    def clear_transactions(self) -> None:
        """Remove every transaction. The host must confirm with the user first."""
        with self._lock:
            self._store.clear()

    def set_goal(self, target_amount: Any, target_date: Any) -> SavingsGoal:
        """
        Replace the savings goal and persist it.

        Raises:
            ValidationError: If the target or date is invalid
        """
        with self._lock:
            return self._goal.set_goal(target_amount, target_date)

    def clear_goal(self) -> None:
        with self._lock:
            self._goal.clear_goal()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def goal(self) -> Optional[SavingsGoal]:
        return self._goal.goal

    def transactions(self, kind: KindSelector = KindFilter.ALL) -> list[Transaction]:
        """History view, optionally filtered by kind."""
        with self._lock:
            return select(self._store.all(), kind)

    def totals(self) -> LedgerTotals:
        with self._lock:
            return summarize(self._store.all())

    def balance(self) -> Decimal:
        return self.totals().balance

    def progress(self) -> Decimal:
        with self._lock:
            return self._goal.progress(summarize(self._store.all()).balance)

    def is_goal_reached(self) -> bool:
        with self._lock:
            return self._goal.is_reached(summarize(self._store.all()).balance)

    def days_remaining(self, now: Optional[Union[datetime, date]] = None) -> Optional[int]:
        return self._goal.days_remaining(now)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export_summary(
        self,
        kind: KindSelector = KindFilter.ALL,
        now: Optional[datetime] = None,
    ) -> DocumentModel:
        """
        Build a summary document of the (optionally filtered) history.

        Totals reflect the exported transactions; the goal block is
        measured against the whole ledger balance.
        """
        with self._lock:
            everything = self._store.all()
            transactions = select(everything, kind)
            ledger_balance = summarize(everything).balance
            goal = self._goal.goal
        return build_summary(
            transactions,
            goal,
            now=now,
            goal_balance=ledger_balance,
            title=self._settings.receipt_title,
            footer=self._settings.receipt_footer,
            currency_symbol=self._settings.currency_symbol,
        )

    async def render_summary(
        self,
        renderer: DocumentRenderer,
        size: Optional[PageSize] = None,
        kind: KindSelector = KindFilter.ALL,
    ) -> bytes:
        """
        Render a summary without blocking the event loop.

        The snapshot is taken before rendering starts; a renderer failure
        propagates but never touches ledger state.
        """
        document = self.export_summary(kind)
        return await asyncio.to_thread(renderer.render, document, size or PageSize())


def create_tracker(
    store: Optional[KeyValueStore] = None,
    settings: Optional[LedgerSettings] = None,
    use_file_store: bool = False,
) -> BudgetTracker:
    """
    Factory function to create a ready-to-use tracker.

    Args:
        store: Key-value backend to use. Takes precedence over use_file_store.
        settings: Settings override (defaults to get_settings())
        use_file_store: Back the ledger with the JSON file at store_path
                        instead of an in-memory dict.

    Returns:
        A BudgetTracker with state loaded from the store
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if store is None:
        if use_file_store:
            store = JsonFileKeyValueStore(
                settings.store_path,
                retry_attempts=settings.write_retry_attempts,
            )
        else:
            store = InMemoryKeyValueStore()

    persistence = PersistenceAdapter(
        store,
        transactions_key=settings.transactions_key,
        goal_key=settings.goal_key,
    )
    return BudgetTracker(persistence, settings=settings)

"""
Persistence Adapter

Serializes the transaction collection and the savings goal to the
injected key-value store, and reads them back at startup.

DESIGN DECISION: Writes are whole-value overwrites, never patches.
Each key always holds a self-consistent snapshot.

READ POLICY: Anything wrong with stored state (absent key, invalid JSON,
wrong shape, duplicate ids, backend error) falls back to the empty default.
A corrupt store must never stop the session from starting.

WRITE POLICY: Backend failures are wrapped in PersistenceWriteError and
raised; the caller decides how loudly to report lost durability.
"""

from typing import Iterable, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from budget_tracker.config import get_settings
from budget_tracker.logger import get_logger
from budget_tracker.models.transaction import SavingsGoal, Transaction
from budget_tracker.services.storage.interface import (
    KeyValueStore,
    PersistenceReadError,
    PersistenceWriteError,
)


logger = get_logger(__name__)

_TRANSACTIONS = TypeAdapter(list[Transaction])
_GOAL = TypeAdapter(Optional[SavingsGoal])


class PersistenceAdapter:
    """
    Bridges the ledger state and a KeyValueStore.

    Encoding is JSON via pydantic: field-labelled objects, Decimal
    amounts as strings (exact round-trip), ISO-8601 dates and timestamps.
    """

    def __init__(
        self,
        store: KeyValueStore,
        transactions_key: Optional[str] = None,
        goal_key: Optional[str] = None,
    ):
        settings = get_settings()
        self._store = store
        self.transactions_key = transactions_key or settings.transactions_key
        self.goal_key = goal_key or settings.goal_key

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    @staticmethod
    def encode_transactions(transactions: Iterable[Transaction]) -> str:
        return _TRANSACTIONS.dump_json(list(transactions)).decode("utf-8")

    @staticmethod
    def encode_goal(goal: Optional[SavingsGoal]) -> str:
        return _GOAL.dump_json(goal).decode("utf-8")

    def decode_transactions(self, raw: str) -> list[Transaction]:
        """
        Raises:
            PersistenceReadError: If raw is not a valid transaction list
        """
        try:
            transactions = _TRANSACTIONS.validate_json(raw)
        except PydanticValidationError as e:
            raise PersistenceReadError(
                self.transactions_key, f"{e.error_count()} invalid field(s)"
            ) from e

        seen = set()
        for transaction in transactions:
            if transaction.id in seen:
                raise PersistenceReadError(
                    self.transactions_key, f"duplicate id {transaction.id}"
                )
            seen.add(transaction.id)
        return transactions

    def decode_goal(self, raw: str) -> Optional[SavingsGoal]:
        """
        Raises:
            PersistenceReadError: If raw is neither null nor a valid goal
        """
        try:
            return _GOAL.validate_json(raw)
        except PydanticValidationError as e:
            raise PersistenceReadError(
                self.goal_key, f"{e.error_count()} invalid field(s)"
            ) from e

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _read(self, key: str) -> Optional[str]:
        try:
            return self._store.get(key)
        except Exception as e:
            raise PersistenceReadError(key, str(e)) from e

    def load_transactions(self) -> tuple[Transaction, ...]:
        """Stored transactions, or an empty tuple if absent or unreadable."""
        try:
            raw = self._read(self.transactions_key)
            if raw is None:
                return ()
            return tuple(self.decode_transactions(raw))
        except PersistenceReadError as e:
            logger.warning("persistence_read_failed", key=e.key, reason=e.reason)
            return ()

    def load_goal(self) -> Optional[SavingsGoal]:
        """Stored goal, or None if absent or unreadable."""
        try:
            raw = self._read(self.goal_key)
            if raw is None:
                return None
            return self.decode_goal(raw)
        except PersistenceReadError as e:
            logger.warning("persistence_read_failed", key=e.key, reason=e.reason)
            return None

    # -------------------------------------------------------------------------
    # Saving
    # -------------------------------------------------------------------------

    def _write(self, key: str, value: str) -> None:
        try:
            self._store.set(key, value)
        except Exception as e:
            raise PersistenceWriteError(key, str(e)) from e

    def save_transactions(self, transactions: Iterable[Transaction]) -> None:
        """
        Overwrite the stored transaction collection.

        Raises:
            PersistenceWriteError: If the store rejects the write
        """
        self._write(self.transactions_key, self.encode_transactions(transactions))

    def save_goal(self, goal: Optional[SavingsGoal]) -> None:
        """
        Overwrite the stored goal; None is stored as JSON null.

        Raises:
            PersistenceWriteError: If the store rejects the write
        """
        self._write(self.goal_key, self.encode_goal(goal))

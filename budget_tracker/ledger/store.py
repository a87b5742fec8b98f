"""
Transaction Store

Owns the ordered collection of transactions.

DESIGN DECISION: The store is purely in-memory. Durability is a side
effect wired in through the on_change callback, which runs as the LAST
step of every mutation, after the collection is already in its new state.
"""

from typing import Any, Callable, Iterable, Iterator, Optional

from budget_tracker.logger import get_logger
from budget_tracker.models.transaction import Transaction
from budget_tracker.validation import build_transaction


logger = get_logger(__name__)


class TransactionStore:
    """
    Ordered, append-only-or-remove collection of transactions.

    Insertion order is preserved. Transactions are frozen, so the
    snapshot returned by all() can be shared without copying records.
    """

    def __init__(
        self,
        transactions: Iterable[Transaction] = (),
        on_change: Optional[Callable[["TransactionStore"], None]] = None,
    ):
        self._transactions: list[Transaction] = list(transactions)
        self._on_change = on_change

    def set_on_change(self, callback: Optional[Callable[["TransactionStore"], None]]) -> None:
        self._on_change = callback

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    def add(self, description: Any, amount: Any, kind: Any) -> Transaction:
        """
        Record a new transaction.

        Args:
            description: Non-blank text
            amount: Positive number (Decimal, int, float or numeric str)
            kind: "income" or "expense"

        Returns:
            The created transaction, with a fresh id and timestamp

        Raises:
            ValidationError: If any input is invalid; the store is unchanged
        """
        transaction = build_transaction(description, amount, kind)
        self._transactions.append(transaction)
        logger.debug(
            "transaction_added",
            transaction_id=transaction.id,
            kind=transaction.kind.value,
            amount=str(transaction.amount),
        )
        self._changed()
        return transaction

    def remove(self, transaction_id: str) -> None:
        """Remove a transaction by id. Unknown ids are ignored."""
        remaining = [t for t in self._transactions if t.id != transaction_id]
        if len(remaining) == len(self._transactions):
            return
        self._transactions = remaining
        logger.debug("transaction_removed", transaction_id=transaction_id)
        self._changed()

    def clear(self) -> None:
        """Remove every transaction. Confirmation is the caller's job."""
        self._transactions = []
        logger.debug("transactions_cleared")
        self._changed()

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Swap in a loaded collection without triggering on_change."""
        self._transactions = list(transactions)

    def all(self) -> tuple[Transaction, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._transactions)

    def get(self, transaction_id: str) -> Optional[Transaction]:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())

    def __contains__(self, transaction_id: object) -> bool:
        return any(t.id == transaction_id for t in self._transactions)

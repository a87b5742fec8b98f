"""
Ledger Calculator

Pure functions deriving totals from a transaction sequence.

GUARANTEES:
- Totals are recomputed from the sequence every time; nothing is cached
- Sums are exact Decimal sums, so order of transactions never matters
- total_income and total_expense are never negative
"""

from decimal import Decimal
from typing import Iterable

from budget_tracker.models.transaction import (
    LedgerTotals,
    Transaction,
    TransactionKind,
)


ZERO = Decimal("0")


def _sum_kind(transactions: Iterable[Transaction], kind: TransactionKind) -> Decimal:
    return sum((t.amount for t in transactions if t.kind == kind), ZERO)


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return _sum_kind(transactions, TransactionKind.INCOME)


def total_expense(transactions: Iterable[Transaction]) -> Decimal:
    return _sum_kind(transactions, TransactionKind.EXPENSE)


def balance(transactions: Iterable[Transaction]) -> Decimal:
    """Income counted positive, expense negative."""
    return sum((t.signed_amount for t in transactions), ZERO)


def summarize(transactions: Iterable[Transaction]) -> LedgerTotals:
    """All derived totals in one pass-friendly call."""
    items = list(transactions)
    return LedgerTotals(
        total_income=total_income(items),
        total_expense=total_expense(items),
        balance=balance(items),
        transaction_count=len(items),
    )

"""
Data Models Package

This package contains all Pydantic models used by the ledger engine.
"""

from budget_tracker.models.transaction import (
    KindFilter,
    KindSelector,
    LedgerTotals,
    SavingsGoal,
    Transaction,
    TransactionKind,
)
from budget_tracker.models.document import (
    DocumentFooter,
    DocumentHeader,
    DocumentModel,
    GoalBlock,
    LineItem,
    TotalsBlock,
)

__all__ = [
    # Ledger models
    "KindFilter",
    "KindSelector",
    "LedgerTotals",
    "SavingsGoal",
    "Transaction",
    "TransactionKind",
    # Document models
    "DocumentFooter",
    "DocumentHeader",
    "DocumentModel",
    "GoalBlock",
    "LineItem",
    "TotalsBlock",
]

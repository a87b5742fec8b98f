"""Ledger engine: store, calculator, savings goal and filters."""

from budget_tracker.ledger.calculator import (
    balance,
    summarize,
    total_expense,
    total_income,
)
from budget_tracker.ledger.filters import select
from budget_tracker.ledger.goal import SavingsGoalTracker, days_until, deadline_label
from budget_tracker.ledger.store import TransactionStore

__all__ = [
    "SavingsGoalTracker",
    "TransactionStore",
    "balance",
    "days_until",
    "deadline_label",
    "select",
    "summarize",
    "total_expense",
    "total_income",
]

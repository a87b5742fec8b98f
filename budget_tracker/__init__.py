"""
Budget Tracker - Ledger Engine

An embedded library for a personal budget: record income and expenses,
see derived totals, track a savings goal, filter the history and export
a receipt-style summary.

DESIGN PRINCIPLES:
1. Totals are always derived, never stored
2. Bad input is rejected loudly, never silently corrected
3. Memory first, then persistence; a failed write never loses the session
4. Storage and rendering are injected, so the engine is host-independent
"""

from budget_tracker.orchestrator import BudgetTracker, create_tracker
from budget_tracker.validation import ValidationError

__version__ = "1.0.0"
__author__ = "Budget Tracker Team"

__all__ = ["BudgetTracker", "ValidationError", "create_tracker"]

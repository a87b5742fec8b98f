"""
Document Exporter

Turns the ledger into a DocumentModel for an external renderer.

CRITICAL BOUNDARY: This module builds data only. It never imports or
calls a rendering API; renderers consume the finished DocumentModel.

Display strings are rounded to 2 decimals (ROUND_HALF_UP). The Decimal
fields next to them keep the stored precision.
"""

from datetime import datetime
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from budget_tracker.config import get_settings
from budget_tracker.ledger.calculator import summarize
from budget_tracker.ledger.goal import SavingsGoalTracker
from budget_tracker.models.document import (
    DocumentFooter,
    DocumentHeader,
    DocumentModel,
    GoalBlock,
    LineItem,
    TotalsBlock,
)
from budget_tracker.models.transaction import SavingsGoal, Transaction


CENT = Decimal("0.01")


def format_amount(amount: Decimal, currency_symbol: str = "$") -> str:
    """Fixed 2-decimal display, sign before the symbol: -$12.50."""
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol}{abs(rounded)}"


def format_signed(transaction: Transaction, currency_symbol: str = "$") -> str:
    """+$10.00 for income, -$4.00 for expense."""
    sign = "+" if transaction.is_income else "-"
    return f"{sign}{format_amount(transaction.amount, currency_symbol)}"


def format_percent(percent: Decimal) -> str:
    # Truncated so 99.6% never reads as 100% before the goal is reached
    return f"{percent.quantize(Decimal('1'), rounding=ROUND_DOWN)}%"


def _goal_block(
    goal: SavingsGoal,
    balance: Decimal,
    now: datetime,
    currency_symbol: str,
) -> GoalBlock:
    tracker = SavingsGoalTracker(goal)
    progress = tracker.progress(balance)
    return GoalBlock(
        target_amount=goal.target_amount,
        target_amount_display=format_amount(goal.target_amount, currency_symbol),
        target_date=goal.target_date,
        progress_percent=progress,
        progress_display=format_percent(progress),
        days_remaining=tracker.days_remaining(now),
        deadline_label=tracker.deadline_label(now),
        is_reached=tracker.is_reached(balance),
    )


def build_summary(
    transactions: Iterable[Transaction],
    goal: Optional[SavingsGoal] = None,
    *,
    now: Optional[datetime] = None,
    goal_balance: Optional[Decimal] = None,
    title: Optional[str] = None,
    footer: Optional[str] = None,
    currency_symbol: Optional[str] = None,
) -> DocumentModel:
    """
    Build a summary/receipt document.

    Args:
        transactions: Ledger transactions, itemized in the given order
        goal: Current savings goal; the goal block is omitted when None
        now: Generation time (defaults to local now)
        goal_balance: Balance the goal is measured against (defaults to the
                      balance of the exported transactions)
        title: Header title (defaults to the receipt_title setting)
        footer: Footer text (defaults to receipt_footer; "" omits the footer)
        currency_symbol: Display currency symbol (defaults to the setting)

    Returns:
        A frozen, presentation-neutral DocumentModel
    """
    settings = get_settings()
    items = list(transactions)
    now = now or datetime.now().astimezone()
    symbol = settings.currency_symbol if currency_symbol is None else currency_symbol
    footer_text = settings.receipt_footer if footer is None else footer

    totals = summarize(items)

    return DocumentModel(
        header=DocumentHeader(
            title=title or settings.receipt_title,
            generated_at=now,
        ),
        totals=TotalsBlock(
            total_income=totals.total_income,
            total_expense=totals.total_expense,
            balance=totals.balance,
            total_income_display=format_amount(totals.total_income, symbol),
            total_expense_display=format_amount(totals.total_expense, symbol),
            balance_display=format_amount(totals.balance, symbol),
        ),
        goal=_goal_block(
            goal,
            totals.balance if goal_balance is None else goal_balance,
            now,
            symbol,
        ) if goal else None,
        items=tuple(
            LineItem(
                transaction_id=t.id,
                description=t.description,
                kind=t.kind,
                amount=t.amount,
                amount_display=format_signed(t, symbol),
                created_at=t.created_at,
            )
            for t in items
        ),
        footer=DocumentFooter(text=footer_text) if footer_text else None,
    )

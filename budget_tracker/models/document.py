"""
Document Models

A presentation-neutral tree describing a receipt/summary.

CRITICAL: These models carry DATA only (strings, numbers, dates).
No fonts, colours, coordinates or page geometry live here; the
external renderer owns all of that.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from budget_tracker.models.transaction import TransactionKind


class DocumentHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    generated_at: datetime


class TotalsBlock(BaseModel):
    """Income, expense and balance with their display strings."""
    model_config = ConfigDict(frozen=True)

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    total_income_display: str
    total_expense_display: str
    balance_display: str


class GoalBlock(BaseModel):
    """Savings goal progress as of the document's generation time."""
    model_config = ConfigDict(frozen=True)

    target_amount: Decimal
    target_amount_display: str
    target_date: date
    progress_percent: Decimal = Field(ge=0, le=100)
    progress_display: str
    days_remaining: int
    deadline_label: str
    is_reached: bool


class LineItem(BaseModel):
    """One itemized transaction."""
    model_config = ConfigDict(frozen=True)

    transaction_id: str
    description: str
    kind: TransactionKind
    amount: Decimal
    amount_display: str = Field(
        ...,
        description="Signed, 2-decimal display string such as +$10.00"
    )
    created_at: datetime


class DocumentFooter(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class DocumentModel(BaseModel):
    """
    The sole input accepted by a DocumentRenderer.

    Sections in reading order: header, totals, optional goal,
    items, optional footer.
    """
    model_config = ConfigDict(frozen=True)

    header: DocumentHeader
    totals: TotalsBlock
    goal: Optional[GoalBlock] = None
    items: tuple[LineItem, ...] = ()
    footer: Optional[DocumentFooter] = None

    @property
    def item_count(self) -> int:
        return len(self.items)

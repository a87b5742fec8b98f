"""
Core Data Models for Budget Tracker

These models define the strict schemas for the ledger.
They are designed to:
1. Enforce the ledger invariants at construction time
2. Be immutable once created (transactions are removed, never edited)
3. Round-trip exactly through the key-value store

DESIGN DECISION: Amounts are Decimal, never float.
Sums stay exact and serialized amounts keep their full precision.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Union
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """Direction of a transaction relative to the balance."""
    INCOME = "income"
    EXPENSE = "expense"


class KindFilter(str, Enum):
    """
    View selector for the transaction history.

    ALL is the identity view; the other members mirror TransactionKind.
    """
    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"


KindSelector = Union[KindFilter, TransactionKind, str]


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# LEDGER MODELS
# =============================================================================

class Transaction(BaseModel):
    """
    A single recorded income or expense event.

    CRITICAL: Transactions are frozen. The store may drop them
    but nothing may change them after creation.

    The loader also accepts the field names written by the original
    browser app ("type" for kind, "date" for created_at). The "date"
    value must be ISO-8601; locale-formatted strings are rejected.
    """
    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    id: str = Field(
        default_factory=_new_id,
        min_length=1,
        description="Unique transaction ID"
    )
    description: str = Field(
        ...,
        min_length=1,
        description="What the money was for"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Positive amount; direction comes from kind"
    )
    kind: TransactionKind = Field(
        ...,
        validation_alias=AliasChoices("kind", "type"),
        description="income or expense"
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        validation_alias=AliasChoices("created_at", "createdAt", "date"),
        description="When the transaction was recorded"
    )

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance."""
        return self.amount if self.is_income else -self.amount


class SavingsGoal(BaseModel):
    """
    A target amount and date against which balance progress is measured.

    At most one goal exists at a time; a new goal replaces the old one whole.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    target_amount: Decimal = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("target_amount", "targetAmount"),
        description="Amount the balance should reach"
    )
    target_date: date = Field(
        ...,
        validation_alias=AliasChoices("target_date", "targetDate"),
        description="Calendar date the target should be reached by"
    )


class LedgerTotals(BaseModel):
    """Derived totals of a transaction sequence. Never stored."""
    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Field(ge=0)
    total_expense: Decimal = Field(ge=0)
    balance: Decimal
    transaction_count: int = Field(ge=0)

"""
Input Validation

DESIGN DECISION: User input is checked BEFORE any model is built and
before the store is touched. Every problem found is collected and
reported at once as a ValidationError.

IMPORTANT: Validation NEVER silently fixes issues.
A blank description or a zero amount is rejected, not defaulted.
The only normalisation is lossless: surrounding whitespace is stripped
and floats are converted through their shortest repr (0.1 -> "0.1").
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from budget_tracker.models.transaction import (
    KindFilter,
    SavingsGoal,
    Transaction,
    TransactionKind,
)


class ValidationIssue(BaseModel):
    """A single problem with user input."""

    field: str = Field(
        ...,
        description="Input field with the issue"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )


class ValidationError(ValueError):
    """
    Bad user input: blank description, non-positive amount,
    invalid date or target.

    Always surfaced to the caller; the ledger is left untouched.
    """

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = list(issues)
        super().__init__(
            "; ".join(f"{issue.field}: {issue.message}" for issue in self.issues)
        )

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([ValidationIssue(field=field, message=message)])

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Translate a pydantic error into ledger validation issues."""
        issues = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ())) or "input"
            issues.append(ValidationIssue(field=field, message=error.get("msg", "invalid")))
        return cls(issues)

    @property
    def fields(self) -> list[str]:
        return [issue.field for issue in self.issues]


# =============================================================================
# FIELD PARSERS
# =============================================================================

def parse_description(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError.single("description", "Description must not be blank")
    return value.strip()


def parse_amount(value: Any, field: str = "amount") -> Decimal:
    """
    Parse a strictly positive, finite amount.

    Accepts Decimal, int, float and numeric strings. bool is rejected
    even though it is an int subclass.
    """
    if isinstance(value, bool):
        raise ValidationError.single(field, "Amount must be a number")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError.single(field, f"Amount is not a number: {value!r}")
    else:
        raise ValidationError.single(field, "Amount must be a number")

    if not amount.is_finite():
        raise ValidationError.single(field, "Amount must be finite")
    if amount <= 0:
        raise ValidationError.single(field, "Amount must be greater than zero")
    return amount


def parse_kind(value: Any) -> TransactionKind:
    raw = value.value if isinstance(value, Enum) else value
    try:
        return TransactionKind(raw)
    except ValueError:
        raise ValidationError.single(
            "kind", f"Kind must be 'income' or 'expense', got {raw!r}"
        )


def parse_kind_filter(value: Any) -> KindFilter:
    raw = value.value if isinstance(value, Enum) else value
    try:
        return KindFilter(raw)
    except ValueError:
        raise ValidationError.single(
            "kind", f"Filter must be 'all', 'income' or 'expense', got {raw!r}"
        )


def parse_calendar_date(value: Any, field: str = "target_date") -> date:
    """
    Parse a calendar date.

    datetime values keep only their date part; strings must be ISO
    formatted (YYYY-MM-DD).
    """
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError.single(field, f"Not a calendar date: {value!r}")
    raise ValidationError.single(field, "Target date must be a date")


# =============================================================================
# MODEL BUILDERS
# =============================================================================

def _collect(*parsers) -> tuple[list, list[ValidationIssue]]:
    values, issues = [], []
    for parse, raw in parsers:
        try:
            values.append(parse(raw))
        except ValidationError as e:
            values.append(None)
            issues.extend(e.issues)
    return values, issues


def build_transaction(description: Any, amount: Any, kind: Any) -> Transaction:
    """
    Validate raw input and build a new Transaction.

    The id and created_at timestamp are assigned here.

    Raises:
        ValidationError: With every issue found across the three inputs
    """
    (clean_description, clean_amount, clean_kind), issues = _collect(
        (parse_description, description),
        (parse_amount, amount),
        (parse_kind, kind),
    )
    if issues:
        raise ValidationError(issues)

    try:
        return Transaction(
            description=clean_description,
            amount=clean_amount,
            kind=clean_kind,
        )
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


def build_goal(target_amount: Any, target_date: Any) -> SavingsGoal:
    """
    Validate raw input and build a SavingsGoal.

    Raises:
        ValidationError: If the target is not positive or the date is invalid
    """
    (clean_amount, clean_date), issues = _collect(
        (lambda raw: parse_amount(raw, field="target_amount"), target_amount),
        (parse_calendar_date, target_date),
    )
    if issues:
        raise ValidationError(issues)

    try:
        return SavingsGoal(target_amount=clean_amount, target_date=clean_date)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e

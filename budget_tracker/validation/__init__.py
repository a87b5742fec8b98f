"""Input validation package."""

from budget_tracker.validation.validator import (
    ValidationError,
    ValidationIssue,
    build_goal,
    build_transaction,
    parse_amount,
    parse_calendar_date,
    parse_description,
    parse_kind,
    parse_kind_filter,
)

__all__ = [
    "ValidationError",
    "ValidationIssue",
    "build_goal",
    "build_transaction",
    "parse_amount",
    "parse_calendar_date",
    "parse_description",
    "parse_kind",
    "parse_kind_filter",
]

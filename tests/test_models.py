"""
Tests for Budget Tracker

Test strategy:
1. Unit tests for individual components (models, validators, ledger)
2. Integration tests for the session facade (with in-memory storage)
3. No real storage backends beyond temporary files
"""

import pytest
from datetime import date, datetime
from decimal import Decimal

from pydantic import ValidationError as PydanticValidationError

from budget_tracker.config import LedgerSettings
from budget_tracker.models.transaction import (
    KindFilter,
    SavingsGoal,
    Transaction,
    TransactionKind,
)
from budget_tracker.validation import (
    ValidationError,
    build_goal,
    build_transaction,
    parse_amount,
    parse_calendar_date,
)


class TestTransactionModel:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction gets an id and timestamp."""
        txn = Transaction(
            description="Salary",
            amount=Decimal("1000.00"),
            kind=TransactionKind.INCOME,
        )
        assert txn.id
        assert txn.created_at.tzinfo is not None
        assert txn.signed_amount == Decimal("1000.00")

    def test_expense_signed_amount(self):
        """Test expenses contribute negatively to the balance."""
        txn = Transaction(description="Rent", amount=Decimal("400"), kind="expense")
        assert txn.kind == TransactionKind.EXPENSE
        assert txn.signed_amount == Decimal("-400")

    def test_transaction_is_frozen(self):
        """Test that a transaction cannot be edited."""
        txn = Transaction(description="Rent", amount=Decimal("400"), kind="expense")
        with pytest.raises(PydanticValidationError):
            txn.amount = Decimal("1")

    def test_transaction_rejects_zero_amount(self):
        """Test that non-positive amounts are rejected."""
        with pytest.raises(ValueError):
            Transaction(description="Nothing", amount=Decimal("0"), kind="income")

    def test_transaction_strips_whitespace(self):
        """Test that whitespace is stripped from the description."""
        txn = Transaction(description="  Coffee  ", amount=Decimal("3"), kind="expense")
        assert txn.description == "Coffee"

    def test_unique_ids(self):
        """Test that generated ids do not collide."""
        ids = {
            Transaction(description="x", amount=Decimal("1"), kind="income").id
            for _ in range(100)
        }
        assert len(ids) == 100

    def test_legacy_field_names(self):
        """Test that 'type' and 'date' are accepted for kind and created_at."""
        txn = Transaction.model_validate({
            "id": "abc",
            "description": "Salary",
            "amount": 1000,
            "type": "income",
            "date": "2024-05-01T10:00:00",
        })
        assert txn.kind == TransactionKind.INCOME
        assert txn.created_at == datetime(2024, 5, 1, 10, 0)
        assert txn.model_dump()["kind"] == TransactionKind.INCOME


class TestSavingsGoalModel:
    """Tests for the SavingsGoal model."""

    def test_goal_creation(self):
        """Test SavingsGoal model creation."""
        goal = SavingsGoal(target_amount=Decimal("1200"), target_date=date(2027, 1, 1))
        assert goal.target_amount == Decimal("1200")

    def test_goal_rejects_non_positive_target(self):
        """Test that the target must be positive."""
        with pytest.raises(ValueError):
            SavingsGoal(target_amount=Decimal("0"), target_date=date(2027, 1, 1))


class TestValidation:
    """Tests for input validation."""

    def test_build_transaction(self):
        """Test a valid transaction is built from raw input."""
        txn = build_transaction("Salary", "1000", "income")
        assert txn.amount == Decimal("1000")
        assert txn.kind == TransactionKind.INCOME

    def test_collects_all_issues(self):
        """Test every invalid input is reported at once."""
        with pytest.raises(ValidationError) as exc_info:
            build_transaction("   ", "-5", "transfer")
        assert exc_info.value.fields == ["description", "amount", "kind"]

    def test_blank_description_rejected(self):
        """Test a blank description is rejected, not defaulted."""
        with pytest.raises(ValidationError, match="description"):
            build_transaction("", 10, "income")

    def test_long_description_accepted(self):
        """Test descriptions have no upper length limit."""
        txn = build_transaction("x" * 201, 10, "income")
        assert len(txn.description) == 201

    @pytest.mark.parametrize("value", [0, -1, "0.00", "abc", "", "nan", "inf", True, None, [1]])
    def test_parse_amount_rejects(self, value):
        """Test non-positive or non-numeric amounts are rejected."""
        with pytest.raises(ValidationError):
            parse_amount(value)

    def test_parse_amount_float_keeps_repr(self):
        """Test floats are converted through their shortest repr."""
        assert parse_amount(0.1) == Decimal("0.1")
        assert parse_amount(" 12.50 ") == Decimal("12.50")

    def test_parse_calendar_date(self):
        """Test accepted date forms."""
        assert parse_calendar_date("2026-12-31") == date(2026, 12, 31)
        assert parse_calendar_date(datetime(2026, 12, 31, 15, 30)) == date(2026, 12, 31)
        assert parse_calendar_date(date(2026, 12, 31)) == date(2026, 12, 31)

    @pytest.mark.parametrize("value", ["tomorrow", "2026-13-01", "", 20261231, None])
    def test_parse_calendar_date_rejects(self, value):
        """Test unparseable dates are rejected."""
        with pytest.raises(ValidationError):
            parse_calendar_date(value)

    def test_build_goal_rejects_both(self):
        """Test goal validation reports target and date together."""
        with pytest.raises(ValidationError) as exc_info:
            build_goal(0, "someday")
        assert exc_info.value.fields == ["target_amount", "target_date"]

    def test_validation_error_is_value_error(self):
        """Test hosts can catch ValidationError as ValueError."""
        with pytest.raises(ValueError):
            build_goal(-1, "2027-01-01")


class TestKinds:
    """Tests for kind enums."""

    def test_kind_values(self):
        """Test kind string values."""
        assert TransactionKind.INCOME.value == "income"
        assert TransactionKind.EXPENSE.value == "expense"
        assert KindFilter("all") == KindFilter.ALL


class TestSettings:
    """Tests for LedgerSettings."""

    def test_defaults(self):
        """Test default keys and receipt wording."""
        settings = LedgerSettings(_env_file=None)
        assert settings.transactions_key == "transactions"
        assert settings.goal_key == "savingsGoal"
        assert settings.receipt_title == "Budget-Tracker Receipt"

    def test_env_override(self, monkeypatch):
        """Test settings are read from BUDGET_TRACKER_* variables."""
        monkeypatch.setenv("BUDGET_TRACKER_GOAL_KEY", "goal")
        monkeypatch.setenv("BUDGET_TRACKER_LOG_LEVEL", "debug")
        settings = LedgerSettings(_env_file=None)
        assert settings.goal_key == "goal"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError):
            LedgerSettings(_env_file=None, log_level="LOUD")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Tests for the savings goal tracker."""

import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from budget_tracker.ledger import SavingsGoalTracker, days_until, deadline_label
from budget_tracker.validation import ValidationError


FUTURE = date.today() + timedelta(days=365)


class TestSetGoal:
    """Tests for set_goal."""

    def test_set_goal(self):
        """Test setting a goal from raw input."""
        tracker = SavingsGoalTracker()
        goal = tracker.set_goal("1200", "2027-06-30")
        assert goal.target_amount == Decimal("1200")
        assert goal.target_date == date(2027, 6, 30)
        assert tracker.goal == goal

    def test_replaces_existing_goal(self):
        """Test a new goal replaces the old one whole."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(1200, FUTURE)
        tracker.set_goal(500, date(2030, 1, 1))
        assert tracker.goal.target_amount == Decimal("500")
        assert tracker.goal.target_date == date(2030, 1, 1)

    @pytest.mark.parametrize("amount,target_date", [
        (0, FUTURE),
        (-100, FUTURE),
        ("lots", FUTURE),
        (1200, "not-a-date"),
        (1200, None),
    ])
    def test_invalid_goal_keeps_previous(self, amount, target_date):
        """Test an invalid goal is rejected and the previous one kept."""
        tracker = SavingsGoalTracker()
        previous = tracker.set_goal(1000, FUTURE)
        with pytest.raises(ValidationError):
            tracker.set_goal(amount, target_date)
        assert tracker.goal == previous

    def test_clear_goal(self):
        """Test clearing the goal notifies once."""
        calls = []
        tracker = SavingsGoalTracker(on_change=calls.append)
        tracker.set_goal(1000, FUTURE)
        tracker.clear_goal()
        tracker.clear_goal()
        assert tracker.goal is None
        assert len(calls) == 2


class TestProgress:
    """Tests for progress and is_reached."""

    def test_half_way(self):
        """Test goal 1200 with balance 600 is 50% and not reached."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(1200, FUTURE)
        assert tracker.progress(Decimal("600.00")) == 50
        assert tracker.is_reached(Decimal("600.00")) is False

    def test_clamped_at_100(self):
        """Test goal 500 with balance 600 is clamped to 100% and reached."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(500, FUTURE)
        assert tracker.progress(Decimal("600.00")) == 100
        assert tracker.is_reached(Decimal("600.00")) is True

    def test_exactly_reached(self):
        """Test balance equal to the target counts as reached."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(500, FUTURE)
        assert tracker.is_reached(500) is True
        assert tracker.progress(500) == 100

    def test_negative_balance_is_zero(self):
        """Test a negative balance reports 0%, not a negative value."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(500, FUTURE)
        assert tracker.progress(Decimal("-250")) == 0

    def test_no_goal(self):
        """Test progress is 0 and never reached without a goal."""
        tracker = SavingsGoalTracker()
        assert tracker.progress(Decimal("1000000")) == 0
        assert tracker.is_reached(Decimal("1000000")) is False
        assert tracker.days_remaining() is None
        assert tracker.deadline_label() is None

    def test_monotonic_and_bounded(self):
        """Test progress never decreases with balance and stays in [0, 100]."""
        tracker = SavingsGoalTracker()
        tracker.set_goal("1200", FUTURE)
        balances = [
            Decimal("-5000"), Decimal("-0.01"), Decimal("0"), Decimal("0.01"),
            Decimal("300"), Decimal("600"), Decimal("1199.99"), Decimal("1200"),
            Decimal("1200.01"), Decimal("99999"),
        ]
        values = [tracker.progress(b) for b in balances]
        assert values == sorted(values)
        assert all(Decimal("0") <= v <= Decimal("100") for v in values)

    def test_accepts_float_balance(self):
        """Test float balances are handled without drift."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(200, FUTURE)
        assert tracker.progress(50.5) == Decimal("25.25")


class TestDaysRemaining:
    """Tests for days_remaining and the deadline label."""

    def test_partial_day_rounds_up(self):
        """Test 14 hours before the target date counts as 1 day."""
        now = datetime(2026, 1, 1, 10, 0)
        assert days_until(date(2026, 1, 2), now) == 1

    def test_target_day_is_zero(self):
        """Test the target date itself counts as reached."""
        now = datetime(2026, 1, 1, 10, 0)
        assert days_until(date(2026, 1, 1), now) == 0

    def test_midnight_exact(self):
        """Test whole days at midnight are not rounded up."""
        now = datetime(2026, 1, 1, 0, 0)
        assert days_until(date(2026, 1, 3), now) == 2

    def test_past_date_is_negative(self):
        """Test a passed date gives a negative count."""
        now = datetime(2026, 1, 1, 10, 0)
        assert days_until(date(2025, 12, 30), now) == -2

    def test_plain_date_now(self):
        """Test a date can be used as now."""
        assert days_until(date(2026, 1, 11), date(2026, 1, 1)) == 10

    def test_timezone_aware_now(self):
        """Test aware datetimes compare against midnight in the same zone."""
        now = datetime(2026, 1, 1, 23, 0, tzinfo=timezone.utc)
        assert days_until(date(2026, 1, 2), now) == 1

    def test_tracker_days_remaining(self):
        """Test tracker delegates to the goal's target date."""
        tracker = SavingsGoalTracker()
        tracker.set_goal(100, "2026-03-01")
        assert tracker.days_remaining(date(2026, 2, 1)) == 28

    @pytest.mark.parametrize("days,label", [
        (30, "30 days left"),
        (1, "1 day left"),
        (0, "Target date reached"),
        (-4, "Target date reached"),
    ])
    def test_deadline_label(self, days, label):
        """Test the countdown never renders a negative count."""
        assert deadline_label(days) == label


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

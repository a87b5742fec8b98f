"""
Savings Goal Tracker

Owns at most one SavingsGoal and measures a balance against it.

Progress is clamped to [0, 100]: a balance above the target reports 100,
a negative balance reports 0 rather than a negative percentage.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Callable, Optional, Union

from budget_tracker.logger import get_logger
from budget_tracker.models.transaction import SavingsGoal
from budget_tracker.validation import build_goal


logger = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
ONE_DAY = timedelta(days=1)


def _as_decimal(value: Union[Decimal, int, float]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def days_until(target: date, now: Optional[Union[datetime, date]] = None) -> int:
    """
    Whole days from now until the start of the target date, rounded up.

    Zero or negative once the target date has been reached.
    """
    if now is None:
        now = datetime.now()
    if isinstance(now, datetime):
        deadline = datetime.combine(target, time.min, tzinfo=now.tzinfo)
        # ceil division on timedeltas: -(-a // b)
        return -((now - deadline) // ONE_DAY)
    return (target - now).days


def deadline_label(days: int) -> str:
    """Human-readable countdown; never shows a negative count."""
    if days <= 0:
        return "Target date reached"
    if days == 1:
        return "1 day left"
    return f"{days} days left"


class SavingsGoalTracker:
    """Holds the current goal and derives progress figures from a balance."""

    def __init__(
        self,
        goal: Optional[SavingsGoal] = None,
        on_change: Optional[Callable[["SavingsGoalTracker"], None]] = None,
    ):
        self._goal = goal
        self._on_change = on_change

    @property
    def goal(self) -> Optional[SavingsGoal]:
        return self._goal

    def set_on_change(self, callback: Optional[Callable[["SavingsGoalTracker"], None]]) -> None:
        self._on_change = callback

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    def set_goal(self, target_amount: Any, target_date: Any) -> SavingsGoal:
        """
        Replace the current goal.

        Args:
            target_amount: Positive number
            target_date: date, datetime or ISO "YYYY-MM-DD" string

        Returns:
            The new goal

        Raises:
            ValidationError: If the target or date is invalid; the
                             previous goal stays in place
        """
        goal = build_goal(target_amount, target_date)
        self._goal = goal
        logger.info(
            "goal_set",
            target_amount=str(goal.target_amount),
            target_date=goal.target_date.isoformat(),
        )
        self._changed()
        return goal

    def clear_goal(self) -> None:
        if self._goal is None:
            return
        self._goal = None
        logger.info("goal_cleared")
        self._changed()

    def load(self, goal: Optional[SavingsGoal]) -> None:
        """Swap in a loaded goal without triggering on_change."""
        self._goal = goal

    def progress(self, balance: Union[Decimal, int, float]) -> Decimal:
        """Percentage of the target covered by balance, within [0, 100]."""
        if self._goal is None or self._goal.target_amount <= 0:
            return ZERO
        percent = _as_decimal(balance) / self._goal.target_amount * HUNDRED
        return min(HUNDRED, max(ZERO, percent))

    def days_remaining(self, now: Optional[Union[datetime, date]] = None) -> Optional[int]:
        """Days left until the target date, or None without a goal."""
        if self._goal is None:
            return None
        return days_until(self._goal.target_date, now)

    def deadline_label(self, now: Optional[Union[datetime, date]] = None) -> Optional[str]:
        days = self.days_remaining(now)
        if days is None:
            return None
        return deadline_label(days)

    def is_reached(self, balance: Union[Decimal, int, float]) -> bool:
        if self._goal is None:
            return False
        return _as_decimal(balance) >= self._goal.target_amount

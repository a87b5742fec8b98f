"""Transaction history views."""

from typing import Iterable

from budget_tracker.models.transaction import KindFilter, KindSelector, Transaction
from budget_tracker.validation import parse_kind_filter


def select(
    transactions: Iterable[Transaction],
    kind: KindSelector = KindFilter.ALL,
) -> list[Transaction]:
    """
    Keep transactions of one kind, preserving their relative order.

    "all" returns every transaction. The input is never modified; a new
    list is always returned.

    Raises:
        ValidationError: If kind is not all/income/expense
    """
    selected = parse_kind_filter(kind)
    if selected == KindFilter.ALL:
        return list(transactions)
    return [t for t in transactions if t.kind.value == selected.value]

"""Summary/receipt export package."""

from budget_tracker.export.renderer import DocumentRenderer, PageSize, TextReceiptRenderer
from budget_tracker.export.summary import (
    build_summary,
    format_amount,
    format_percent,
    format_signed,
)

__all__ = [
    "DocumentRenderer",
    "PageSize",
    "TextReceiptRenderer",
    "build_summary",
    "format_amount",
    "format_percent",
    "format_signed",
]

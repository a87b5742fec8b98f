"""
Renderer Contract

The ledger hands a DocumentModel plus a page size hint to a renderer and
gets bytes back. Real renderers (PDF, image) live outside this package.

TextReceiptRenderer is a plain-text receipt in the 80 mm till-roll
layout. Hosts can use it directly, and it serves as a reference consumer.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from budget_tracker.models.document import DocumentModel


class PageSize(BaseModel):
    """Target page size in points. The default is an 80 mm receipt."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=226, gt=0)
    height: float = Field(default=320, gt=0)


class DocumentRenderer(ABC):
    """Turns a finished DocumentModel into output bytes."""

    @abstractmethod
    def render(self, document: DocumentModel, size: PageSize) -> bytes:
        """
        Render a document.

        Args:
            document: The summary/receipt to render
            size: Target page size hint

        Returns:
            Rendered output (text, image or PDF bytes)
        """
        pass


class TextReceiptRenderer(DocumentRenderer):
    """Monospaced text receipt, UTF-8 encoded."""

    FONT_SIZE = 9
    PADDING = 6
    MIN_COLUMNS = 20

    def columns_for(self, size: PageSize) -> int:
        # Monospace glyphs are ~0.6em wide
        usable = size.width - 2 * self.PADDING
        return max(self.MIN_COLUMNS, int(usable / (self.FONT_SIZE * 0.6)))

    @staticmethod
    def _row(left: str, right: str, width: int) -> str:
        room = width - len(right) - 1
        if len(left) > room:
            left = left[: max(room - 1, 0)] + "…"
        return left + " " * (width - len(left) - len(right)) + right

    def render(self, document: DocumentModel, size: PageSize = PageSize()) -> bytes:
        width = self.columns_for(size)
        divider = "." * width
        generated = document.header.generated_at

        lines = [
            document.header.title.center(width).rstrip(),
            f"{generated:%Y-%m-%d} {generated:%H:%M:%S}".center(width).rstrip(),
            divider,
        ]
        for item in document.items:
            lines.append(
                self._row(f"{item.description} ({item.kind.value})", item.amount_display, width)
            )
        totals = document.totals
        lines += [
            divider,
            self._row("Income", totals.total_income_display, width),
            self._row("Expense", totals.total_expense_display, width),
            divider,
            self._row("Balance", totals.balance_display, width),
            divider,
        ]
        if document.goal:
            goal = document.goal
            lines += [
                self._row("Savings goal", goal.target_amount_display, width),
                self._row("Progress", goal.progress_display, width),
                self._row(f"By {goal.target_date.isoformat()}", goal.deadline_label, width),
                divider,
            ]
        if document.footer:
            lines.append(document.footer.text.center(width).rstrip())

        return ("\n".join(lines) + "\n").encode("utf-8")

"""Settle CLI console utilities for output formatting."""

from typing import Any, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from settle.cli.design_standards import COLORS, GROUP_STYLES, LAYOUT, SYMBOLS
from settle.core.models.outcome import ClassificationResult
from settle.core.utils.helpers import describe_reason

SETTLE_THEME = Theme(COLORS)


class SettleConsole(Console):
    """Settle-styled console for classification output."""

    def __init__(self, **kwargs):
        kwargs.setdefault('width', LAYOUT['terminal_width'])
        super().__init__(theme=SETTLE_THEME, **kwargs)

    def print_header(self, text: str) -> None:
        """Print a styled header."""
        self.print()
        self.print(f"[primary]{text}[/primary]")
        self.print("─" * len(text), style="muted")
        self.print()

    def print_metric(self, label: str, value: Any, style: str = "info") -> None:
        """Print a metric with label and value."""
        self.print(f"[muted]{label}:[/muted] [{style}]{value}[/{style}]")

    def print_classification(self, result: ClassificationResult[Any, Any]) -> None:
        """Print counts, then fulfilled values, then rejected reasons."""
        self.print_metric("Settled", result.total)
        self.print_metric("Fulfilled", len(result.fulfilled_values), style="success")
        self.print_metric("Rejected", len(result.rejected_reasons), style="error")
        self.print()

        self.print(self.format_group(
            "Fulfilled values",
            [repr(value) for value in result.fulfilled_values],
            header_style=GROUP_STYLES['fulfilled_header'],
            row_style=GROUP_STYLES['fulfilled_value'],
        ))
        self.print(self.format_group(
            "Rejected reasons",
            [describe_reason(reason) for reason in result.rejected_reasons],
            header_style=GROUP_STYLES['rejected_header'],
            row_style=GROUP_STYLES['rejected_reason'],
        ))

    def format_group(self, title: str, rows: Sequence[str],
                     header_style: str, row_style: str) -> Table:
        """Render one output group as a numbered table."""
        table = Table(title=title, title_style=header_style, show_header=True)
        table.add_column("#", style=GROUP_STYLES['index'], justify="right",
                         width=LAYOUT['index_column_width'])
        table.add_column("Payload", style=row_style)

        if not rows:
            table.add_row("", Text("(none)", style="muted"))
        for i, row in enumerate(rows):
            table.add_row(str(i + 1), Text(row))

        return table


def format_error(message: str) -> Text:
    """Format an error message."""
    return Text(f"{SYMBOLS['fail']} {message}", style="error")


def format_success(message: str) -> Text:
    """Format a success message."""
    return Text(f"{SYMBOLS['pass']} {message}", style="success")

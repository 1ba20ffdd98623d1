"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from trashtui.core.config import DEFAULT_DATE_FORMAT
from trashtui.core.theme import get_theme

if TYPE_CHECKING:
    from trashtui.trash.search import FilteredRow


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_date(value: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a deletion date for display."""
    return value.strftime(date_format)


def highlight_name(name: str, ranges: list[tuple[int, int]] | None) -> Text:
    """Build a display name with matched character ranges highlighted.

    Args:
        name: Display name.
        ranges: Half-open (start, end) ranges to highlight, or None.

    Returns:
        Rich Text styled as an entry name.
    """
    text = Text(name, style="entry.name", no_wrap=True, overflow="ellipsis")
    for start, end in ranges or []:
        text.stylize("match", start, end)
    return text


def create_entry_table(title: str | None = "Trash", date_width: int = 19) -> Table:
    """Create a pre-configured table for displaying trash entries.

    Args:
        title: Table title.
        date_width: Width of the deletion date column.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
        expand=True,
    )
    table.add_column("Name", ratio=1, no_wrap=True, overflow="ellipsis")
    table.add_column("Deleted", style="entry.date", width=date_width, no_wrap=True)
    return table


def format_entry_row(
    row: FilteredRow, date_format: str = DEFAULT_DATE_FORMAT
) -> tuple[Text, str]:
    """Format a filtered row as (name, date) table cells."""
    return (
        highlight_name(row.entry.display_name, row.ranges),
        format_date(row.entry.deleted_at, date_format),
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")

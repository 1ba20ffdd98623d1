"""Rich renderables for the interactive browser.

Each function turns one part of the AppState into a renderable; the
Textual app places them on screen. Nothing here mutates the state.
"""

from datetime import datetime

from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from trashtui.core.config import DEFAULT_DATE_FORMAT
from trashtui.core.state import AppState, InputMode, Message, PendingAction
from trashtui.utils.formatting import create_entry_table, format_entry_row

TITLE = "Trash TUI"

# Panel border plus the table header row
LIST_CHROME_HEIGHT = 3

CONFIRM_PROMPTS: dict[PendingAction, str] = {
    PendingAction.RESTORE: "Restore selected item?",
    PendingAction.DELETE: "Delete selected item?",
    PendingAction.EMPTY: "Empty the trash?",
    PendingAction.OVERRIDE: "Override existing file?",
}


class ListViewport:
    """Scroll offset of the entry list.

    The offset only moves as far as needed to keep the cursor visible.
    """

    def __init__(self) -> None:
        self.offset = 0

    def window(self, total: int, height: int, cursor: int | None) -> range:
        """Return the row indices to display."""
        height = max(1, height)
        if cursor is not None:
            if cursor < self.offset:
                self.offset = cursor
            elif cursor >= self.offset + height:
                self.offset = cursor - height + 1
        self.offset = max(0, min(self.offset, total - height))
        return range(self.offset, min(total, self.offset + height))


def viewport_height_for(list_height: int) -> int:
    """Number of entry rows that fit in a list area of the given height."""
    return max(1, list_height - LIST_CHROME_HEIGHT)


def render_list(
    state: AppState,
    viewport: ListViewport,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RenderableType:
    """Render the visible window of the (filtered) entry list."""
    if not state.catalog.entries:
        return Panel(
            Align.center(Text("Trash is empty", style="text"), vertical="middle"),
            title=TITLE,
            border_style="border",
        )

    rows = state.visible_rows()
    cursor = state.cursor_position(rows)
    table = create_entry_table(title=None, date_width=_date_column_width(date_format))
    table.box = None

    for index in viewport.window(len(rows), state.catalog.viewport_height, cursor):
        name, date = format_entry_row(rows[index], date_format)
        if index == cursor:
            table.add_row(Text(">> ").append_text(name), date, style="selection")
        else:
            table.add_row(Text("   ").append_text(name), date)

    position = "-" if cursor is None else str(cursor + 1)
    return Panel(
        table,
        title=TITLE,
        subtitle=f"{position}/{len(rows)}",
        border_style="border",
    )


def _date_column_width(date_format: str) -> int:
    return len(datetime(2000, 12, 31, 23, 59, 59).strftime(date_format))


def render_search(query: str) -> RenderableType:
    line = Text.assemble(("  ", "dim"), (query, "bold accent"))
    return Panel(line, border_style="border")


def render_footer(mode: InputMode) -> RenderableType:
    """Render the key hints for the current mode."""

    def hints(*pairs: tuple[str, str]) -> Text:
        text = Text()
        for index, (key, label) in enumerate(pairs):
            if index:
                text.append(", ")
            text.append(key, style="key")
            text.append(f" - {label}")
        return text

    match mode:
        case InputMode.CHOOSING_SORT:
            return Text("Sort by: ").append_text(
                hints(
                    ("d", "date"),
                    ("D", "date descending"),
                    ("n", "name"),
                    ("N", "name descending"),
                )
            )
        case InputMode.FILTERING:
            return hints(
                ("▲ ▼", "move"),
                ("<enter>", "apply filter"),
                ("<esc>", "clear filter"),
            )
        case InputMode.BROWSING:
            return hints(
                ("◄ ▲ ▼ ►", "move"),
                ("<q>", "quit"),
                ("<enter>", "restore"),
                ("<f>", "search"),
                ("<s>", "sort"),
                ("<d>", "delete"),
                ("<e>", "empty trash"),
            )


def render_dialog(pending: PendingAction) -> RenderableType:
    """Render the confirmation dialog for a pending action."""
    body = Text.assemble(
        (CONFIRM_PROMPTS[pending], "bold"),
        "\n\n",
        ("[ Enter ]", "bold success"),
        "  ",
        ("[ Esc ]", "error"),
        justify="center",
    )
    return Panel(body, title="Confirm", border_style="border")


def render_message(message: Message) -> RenderableType:
    style = "error" if message.is_error else "info"
    return Panel(Text(message.text, style=style), border_style="border")

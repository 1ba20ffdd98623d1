"""Interactive browser state and input handling.

This module holds the single state aggregate of the browser: the catalog,
the input mode, the query string, the pending confirmation, and the
transient message. Every key event is routed through AppState.handle_key,
which dispatches on the input mode and the pending action.

Keys are passed as strings: printable keys as their character ("q", "N",
"/"), special keys by name ("enter", "escape", "up", "pagedown", ...).
"""

import logging
from dataclasses import dataclass
from enum import Enum

from trashtui.trash.catalog import Catalog
from trashtui.trash.models import DEFAULT_SORT_MODE, SortMode, TrashEntry
from trashtui.trash.operator import TrashAction, TrashActionResult, TrashOperator, path_exists
from trashtui.trash.search import FilteredRow, filter_entries

logger = logging.getLogger(__name__)


class InputMode(Enum):
    """Top-level input mode of the browser.

    Attributes:
        BROWSING: Navigating the list and requesting actions.
        FILTERING: Typing a search query.
        CHOOSING_SORT: Waiting for a sort key.
    """

    BROWSING = "browsing"
    FILTERING = "filtering"
    CHOOSING_SORT = "choosing_sort"


class PendingAction(Enum):
    """Destructive action awaiting confirmation.

    Attributes:
        RESTORE: Restore the selected entry.
        DELETE: Permanently delete the selected entry.
        EMPTY: Permanently delete everything in the trash.
        OVERRIDE: Restore the selected entry over an existing file.
    """

    RESTORE = "restore"
    DELETE = "delete"
    EMPTY = "empty"
    OVERRIDE = "override"


@dataclass(frozen=True, slots=True)
class Message:
    """Transient user-facing message, cleared on the next key press."""

    text: str
    is_error: bool = False

    @classmethod
    def info(cls, text: str) -> "Message":
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, text: str) -> "Message":
        return cls(text=text, is_error=True)


SORT_KEYS: dict[str, SortMode] = {
    "n": SortMode.NAME_ASC,
    "N": SortMode.NAME_DESC,
    "d": SortMode.DATE_ASC,
    "D": SortMode.DATE_DESC,
}

AFFIRMATIVE_KEYS = frozenset({"y", "Y", "enter"})

_SUCCESS_TEXT: dict[TrashAction, str] = {
    TrashAction.RESTORE: "Item restored successfully",
    TrashAction.DELETE: "Item deleted successfully",
    TrashAction.EMPTY: "Trash emptied successfully",
}

_FAILURE_TEXT: dict[TrashAction, str] = {
    TrashAction.RESTORE: "Error restoring item",
    TrashAction.DELETE: "Error deleting item",
    TrashAction.EMPTY: "Error emptying trash",
}


def result_message(result: TrashActionResult) -> Message:
    """Build the user-facing message for an operator result."""
    if not result.success:
        return Message.error(f"{_FAILURE_TEXT[result.action]}: {result.error}")
    if result.warning:
        return Message.error(f"{_SUCCESS_TEXT[result.action]}, but: {result.warning}")
    return Message.info(_SUCCESS_TEXT[result.action])


class AppState:
    """State of the interactive trash browser.

    Attributes:
        catalog: Entries, sort order, and cursor.
        operator: Performs restore/delete/empty on the trash.
        sort_mode: Current ordering, reapplied on every refresh.
        mode: Current input mode.
        query: Current search query; empty means no filter.
        pending: Action awaiting confirmation, if any.
        message: Transient message to display, if any.
    """

    def __init__(
        self,
        catalog: Catalog,
        operator: TrashOperator,
        sort_mode: SortMode = DEFAULT_SORT_MODE,
    ) -> None:
        self.catalog = catalog
        self.operator = operator
        self.sort_mode = sort_mode
        self.mode = InputMode.BROWSING
        self.query = ""
        self.pending: PendingAction | None = None
        self.message: Message | None = None

    # -- Read-only view for the renderer -------------------------------------

    def visible_rows(self) -> list[FilteredRow]:
        """Return the rows currently shown, filtered by the query."""
        return filter_entries(self.catalog.entries, self.query)

    def cursor_position(self, rows: list[FilteredRow] | None = None) -> int | None:
        """Return the index of the selected entry within the visible rows.

        The position is found by entry identity, so it stays correct when
        the filtered view reorders or hides rows.
        """
        selected = self.catalog.selected()
        if selected is None:
            return None
        if rows is None:
            rows = self.visible_rows()
        for index, row in enumerate(rows):
            if row.entry.metadata_path == selected.metadata_path:
                return index
        return None

    def selected_entry(self) -> TrashEntry | None:
        """Return the selected entry if it is visible in the current view."""
        selected = self.catalog.selected()
        if selected is None or not self.query:
            return selected
        if self.cursor_position() is None:
            return None
        return selected

    # -- Event entry points ---------------------------------------------------

    def handle_resize(self, viewport_height: int) -> None:
        """Apply a new number of visible list rows."""
        self.catalog.resize(viewport_height)

    def handle_key(self, key: str) -> bool:
        """Route one key press.

        Args:
            key: Key name or printable character.

        Returns:
            True if the browser should quit.
        """
        self.message = None

        if self.pending is not None:
            self._handle_confirmation(key)
            return False

        match self.mode:
            case InputMode.BROWSING:
                return self._handle_browsing(key)
            case InputMode.FILTERING:
                self._handle_filtering(key)
            case InputMode.CHOOSING_SORT:
                self._handle_sort_choice(key)
        return False

    def refresh(self) -> None:
        """Rescan the trash, reporting listing failures as a message.

        An action result already in the message stays ahead of the listing error.
        With a query active, a selection hidden by the refresh moves to the
        first visible row.
        """
        try:
            self.catalog.refresh(self.sort_mode)
        except OSError as e:
            logger.warning("Failed to scan trash: %s", e)
            text = f"Error reading trash: {e}"
            if self.message is not None:
                text = f"{self.message.text}. {text}"
            self.message = Message.error(text)
            return
        self._select_visible()

    # -- Mode handlers --------------------------------------------------------

    def _handle_browsing(self, key: str) -> bool:
        match key:
            case "q" | "escape":
                return True
            case "f" | "/":
                self.mode = InputMode.FILTERING
            case "s":
                self.mode = InputMode.CHOOSING_SORT
            case "down" | "j":
                self._step(1)
            case "up" | "k":
                self._step(-1)
            case "pagedown" | "right" | "l":
                self._page(1)
            case "pageup" | "left" | "h":
                self._page(-1)
            case "enter":
                self._request(PendingAction.RESTORE)
            case "d":
                self._request(PendingAction.DELETE)
            case "e":
                self._request(PendingAction.EMPTY)
            case "r":
                self.refresh()
        return False

    def _handle_filtering(self, key: str) -> None:
        match key:
            case "enter":
                self.mode = InputMode.BROWSING
            case "escape":
                self.query = ""
                self.mode = InputMode.BROWSING
                if self.catalog.selected() is None:
                    self.catalog.select_first()
            case "down":
                self._step(1)
            case "up":
                self._step(-1)
            case "pagedown":
                self._page(1)
            case "pageup":
                self._page(-1)
            case "backspace":
                self._set_query(self.query[:-1])
            case "ctrl+u":
                self._set_query("")
            case _ if len(key) == 1 and key.isprintable():
                self._set_query(self.query + key)

    def _handle_sort_choice(self, key: str) -> None:
        self.sort_mode = SORT_KEYS.get(key, DEFAULT_SORT_MODE)
        self.catalog.sort(self.sort_mode)
        self.mode = InputMode.BROWSING

    # -- Navigation -----------------------------------------------------------

    def _set_query(self, query: str) -> None:
        self.query = query
        self._select_visible()

    def _select_visible(self) -> None:
        rows = self.visible_rows()
        if rows and self.cursor_position(rows) is None:
            self.catalog.select_path(rows[0].entry.metadata_path)

    def _step(self, delta: int) -> None:
        if not self.query:
            if delta > 0:
                self.catalog.move_next()
            else:
                self.catalog.move_prev()
            return

        rows = self.visible_rows()
        if not rows:
            return
        position = self.cursor_position(rows)
        if position is None:
            target = 0 if delta > 0 else len(rows) - 1
        else:
            target = (position + delta) % len(rows)
        self.catalog.select_path(rows[target].entry.metadata_path)

    def _page(self, direction: int) -> None:
        if not self.query:
            if direction > 0:
                self.catalog.page_next()
            else:
                self.catalog.page_prev()
            return

        rows = self.visible_rows()
        if not rows:
            return
        position = self.cursor_position(rows)
        if position is None:
            target = 0
        else:
            target = position + direction * self.catalog.viewport_height
            target = min(max(target, 0), len(rows) - 1)
        self.catalog.select_path(rows[target].entry.metadata_path)

    # -- Confirmation ---------------------------------------------------------

    def _request(self, action: PendingAction) -> None:
        match action:
            case PendingAction.RESTORE | PendingAction.DELETE:
                if self.selected_entry() is not None:
                    self.pending = action
            case PendingAction.EMPTY:
                if self.catalog.entries:
                    self.pending = action
                else:
                    self.message = Message.info("Trash is already empty")

    def _handle_confirmation(self, key: str) -> None:
        action = self.pending
        self.pending = None

        if action is None or key not in AFFIRMATIVE_KEYS:
            return

        result: TrashActionResult
        match action:
            case PendingAction.EMPTY:
                result = self.operator.empty()
            case PendingAction.RESTORE | PendingAction.OVERRIDE | PendingAction.DELETE:
                # Re-resolve the target: the selection is not captured at request time
                entry = self.selected_entry()
                if entry is None:
                    return
                if action == PendingAction.DELETE:
                    result = self.operator.delete(entry)
                elif action == PendingAction.OVERRIDE:
                    result = self.operator.restore(entry, overwrite=True)
                else:
                    try:
                        exists = path_exists(entry.restore_location)
                    except OSError as e:
                        self.message = Message.error(f"Error checking file existence: {e}")
                        return
                    if exists:
                        self.pending = PendingAction.OVERRIDE
                        return
                    result = self.operator.restore(entry)

        self.message = result_message(result)
        self.refresh()

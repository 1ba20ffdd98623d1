"""In-memory catalog of trash entries.

The catalog owns the parsed entries, their sort order, and the cursor.
Selection is stored as an index into the unfiltered entry list and is
carried across refreshes and re-sorts by entry identity (metadata path).
"""

import logging
from pathlib import Path

from trashtui.trash.models import DEFAULT_SORT_MODE, SortMode, TrashDirs, TrashEntry
from trashtui.trash.parser import TrashInfoParseError, parse_trash_info

logger = logging.getLogger(__name__)


def scan_entries(dirs: TrashDirs) -> list[TrashEntry]:
    """Parse every metadata file in the info directory.

    Files that fail to parse are dropped.

    Args:
        dirs: Trash directories to scan.

    Returns:
        Parsed entries in directory listing order.

    Raises:
        OSError: If the info directory cannot be listed.
    """
    entries: list[TrashEntry] = []
    for path in dirs.info.iterdir():
        if not path.is_file():
            continue
        try:
            entries.append(parse_trash_info(path, dirs))
        except TrashInfoParseError as e:
            logger.debug("Skipping unparseable trash info: %s", e)
    return entries


def sort_entries(entries: list[TrashEntry], mode: SortMode) -> None:
    """Sort entries in place according to a sort mode."""
    match mode:
        case SortMode.NAME_ASC:
            entries.sort(key=lambda e: e.display_name.casefold())
        case SortMode.NAME_DESC:
            entries.sort(key=lambda e: e.display_name.casefold(), reverse=True)
        case SortMode.DATE_ASC:
            entries.sort(key=lambda e: e.deleted_at, reverse=True)
        case SortMode.DATE_DESC:
            entries.sort(key=lambda e: e.deleted_at)


class Catalog:
    """Sorted list of trash entries with cursor and viewport state.

    Attributes:
        dirs: Trash directories backing this catalog.
        entries: Current entries, in display order.
        selected_index: Index of the selected entry, or None.
        viewport_height: Number of rows visible at once, used for paging.
    """

    def __init__(
        self,
        dirs: TrashDirs,
        viewport_height: int = 1,
        sort_mode: SortMode = DEFAULT_SORT_MODE,
    ) -> None:
        """Initialize the catalog and perform the initial scan.

        Args:
            dirs: Trash directories to read from.
            viewport_height: Initial number of visible rows.
            sort_mode: Initial ordering.

        Raises:
            OSError: If the info directory cannot be listed.
        """
        self.dirs = dirs
        self.entries: list[TrashEntry] = []
        self.selected_index: int | None = None
        self.viewport_height = max(1, viewport_height)
        self.refresh(sort_mode)

    def __len__(self) -> int:
        return len(self.entries)

    def refresh(self, sort_mode: SortMode) -> None:
        """Re-read the trash and re-establish the selection.

        If the previously selected entry still exists it stays selected at
        its new position; otherwise the first entry is selected.

        Raises:
            OSError: If the info directory cannot be listed. The current
                entries are left untouched in that case.
        """
        previous = self.selected()
        entries = scan_entries(self.dirs)
        sort_entries(entries, sort_mode)
        self.entries = entries

        if previous is not None and self.select_path(previous.metadata_path):
            return
        self.selected_index = 0 if self.entries else None

    def sort(self, mode: SortMode) -> None:
        """Reorder entries in place, keeping the selected entry selected."""
        previous = self.selected()
        sort_entries(self.entries, mode)
        if previous is not None:
            self.select_path(previous.metadata_path)

    def selected(self) -> TrashEntry | None:
        """Return the selected entry, if any."""
        if self.selected_index is None:
            return None
        return self.entries[self.selected_index]

    def select_path(self, metadata_path: Path) -> bool:
        """Select the entry with the given metadata path.

        Returns:
            True if the entry was found and selected.
        """
        for index, entry in enumerate(self.entries):
            if entry.metadata_path == metadata_path:
                self.selected_index = index
                return True
        return False

    def select_first(self) -> None:
        """Select the first entry, or nothing if the catalog is empty."""
        self.selected_index = 0 if self.entries else None

    def move_next(self) -> None:
        """Select the next entry, wrapping to the first after the last."""
        if not self.entries:
            return
        if self.selected_index is None:
            self.selected_index = 0
            return
        self.selected_index = (self.selected_index + 1) % len(self.entries)

    def move_prev(self) -> None:
        """Select the previous entry, wrapping to the last before the first."""
        if not self.entries:
            return
        if self.selected_index is None:
            self.selected_index = len(self.entries) - 1
            return
        self.selected_index = (self.selected_index - 1) % len(self.entries)

    def page_next(self) -> None:
        """Move the selection down one viewport, stopping at the last entry."""
        if not self.entries:
            return
        if self.selected_index is None:
            self.selected_index = 0
            return
        self.selected_index = min(
            self.selected_index + self.viewport_height, len(self.entries) - 1
        )

    def page_prev(self) -> None:
        """Move the selection up one viewport, stopping at the first entry."""
        if not self.entries:
            return
        if self.selected_index is None:
            self.selected_index = 0
            return
        self.selected_index = max(self.selected_index - self.viewport_height, 0)

    def resize(self, viewport_height: int) -> None:
        """Set the viewport height used for paging (at least one row)."""
        self.viewport_height = max(1, viewport_height)

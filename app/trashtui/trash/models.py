"""Trash domain models.

This module defines the core data structures for representing the trash
directory layout and the items found in it.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class SortMode(str, Enum):
    """Ordering applied to the catalog.

    The date modes keep their historical names: ascending shows the most
    recently deleted item first.

    Attributes:
        NAME_ASC: Display name, A to Z.
        NAME_DESC: Display name, Z to A.
        DATE_ASC: Deletion date, newest first.
        DATE_DESC: Deletion date, oldest first.
    """

    NAME_ASC = "name"
    NAME_DESC = "name-desc"
    DATE_ASC = "date"
    DATE_DESC = "date-desc"


DEFAULT_SORT_MODE = SortMode.DATE_ASC


@dataclass(frozen=True, slots=True)
class TrashDirs:
    """The three directories making up a trash can.

    Attributes:
        root: Trash root (e.g., ~/.local/share/Trash).
        files: Directory holding trashed content.
        info: Directory holding one .trashinfo file per trashed item.
    """

    root: Path
    files: Path
    info: Path

    @classmethod
    def from_root(cls, root: Path) -> "TrashDirs":
        """Build the directory triple for a trash root."""
        return cls(root=root, files=root / "files", info=root / "info")


@dataclass(frozen=True, slots=True)
class TrashEntry:
    """A single item in the trash.

    Entries are immutable and replaced wholesale whenever the catalog is
    refreshed. The metadata path is the identity of an entry.

    Attributes:
        display_name: Decoded base name of the original path.
        metadata_path: Path of the .trashinfo file describing this item.
        content_path: Path of the trashed content under the files directory.
        restore_location: Absolute path the item was deleted from.
        deleted_at: Deletion time as an aware local timestamp.
    """

    display_name: str
    metadata_path: Path
    content_path: Path
    restore_location: Path
    deleted_at: datetime

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.display_name:
            msg = "Display name cannot be empty"
            raise ValueError(msg)
        if self.deleted_at.tzinfo is None:
            msg = "Deletion time must be timezone-aware"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if the trashed content is a directory."""
        return self.content_path.is_dir() and not self.content_path.is_symlink()

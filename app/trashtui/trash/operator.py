"""Trash mutation operator.

Handles restoring, deleting, and emptying trashed items. Failures are
returned as results rather than raised so that the interactive browser
can show them and keep running.
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from trashtui.trash.models import TrashDirs, TrashEntry

logger = logging.getLogger(__name__)


class TrashAction(str, Enum):
    """Kind of trash mutation."""

    RESTORE = "restore"
    DELETE = "delete"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class TrashActionResult:
    """Result of a single trash mutation.

    Attributes:
        action: The mutation that was attempted.
        target: Path or name the mutation operated on.
        success: Whether the main part of the operation completed.
        error: Error message if the operation failed, None otherwise.
        warning: Problem that did not undo a successful operation (e.g. a
            metadata file left behind after a restore).
    """

    action: TrashAction
    target: str
    success: bool
    error: str | None = None
    warning: str | None = None


def path_exists(path: Path) -> bool:
    """Check if a path exists, counting dangling symlinks."""
    return path.is_symlink() or path.exists()


def remove_path(path: Path) -> None:
    """Remove a file, symlink, or directory tree.

    Raises:
        OSError: If removal fails.
    """
    # Directories (but not symlinks to directories)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def backup_path(path: Path) -> Path:
    """Pick an unused hidden sibling name for setting a path aside."""
    n = 0
    candidate = path.with_name(f".{path.name}.trashtui-{n}")
    while path_exists(candidate):
        n += 1
        candidate = path.with_name(f".{path.name}.trashtui-{n}")
    return candidate


class TrashOperator:
    """Performs filesystem mutations on a trash can.

    Attributes:
        _dirs: Trash directories operated on.
    """

    def __init__(self, dirs: TrashDirs) -> None:
        """Initialize the TrashOperator.

        Args:
            dirs: Trash directories to operate on.
        """
        self._dirs = dirs

    def restore(self, entry: TrashEntry, overwrite: bool = False) -> TrashActionResult:
        """Move an entry's content back to its original location.

        An existing item at the restore location is only set aside, and is
        removed once the content is in place or put back if the move fails.
        The metadata file is removed only after the content has been moved.
        If that removal fails the restore still counts as successful and
        the problem is reported as a warning.

        Args:
            entry: Entry to restore.
            overwrite: Replace an existing file or directory at the
                restore location.

        Returns:
            TrashActionResult for the restore.
        """
        target = str(entry.restore_location)

        if not path_exists(entry.content_path):
            return TrashActionResult(
                action=TrashAction.RESTORE,
                target=target,
                success=False,
                error=(
                    f"File not found: {entry.content_path}, name: {entry.display_name}, "
                    f"restore location: {entry.restore_location}"
                ),
            )

        backup: Path | None = None
        try:
            if path_exists(entry.restore_location):
                if not overwrite:
                    return TrashActionResult(
                        action=TrashAction.RESTORE,
                        target=target,
                        success=False,
                        error=f"Restore location already exists: {target}",
                    )
                # Set aside until the move succeeds
                aside = backup_path(entry.restore_location)
                entry.restore_location.rename(aside)
                backup = aside
                logger.info("Moved existing %s aside to %s", target, backup)

            entry.restore_location.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(entry.content_path), target)
        except OSError as e:
            logger.warning("Failed to restore %s: %s", target, e)
            error = str(e)
            if backup is not None:
                error = self._put_back(backup, entry.restore_location, error)
            return TrashActionResult(
                action=TrashAction.RESTORE,
                target=target,
                success=False,
                error=error,
            )

        logger.info("Restored %s", target)
        warnings: list[str] = []

        if backup is not None:
            try:
                remove_path(backup)
            except OSError as e:
                logger.warning("Could not remove replaced %s: %s", backup, e)
                warnings.append(f"Replaced item left at {backup}: {e}")

        try:
            entry.metadata_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Restored %s but kept metadata %s: %s", target, entry.metadata_path, e)
            warnings.append(f"Could not remove trash info file {entry.metadata_path}: {e}")

        return TrashActionResult(
            action=TrashAction.RESTORE,
            target=target,
            success=True,
            warning="; ".join(warnings) or None,
        )

    @staticmethod
    def _put_back(backup: Path, destination: Path, error: str) -> str:
        """Return a set-aside item to its place after a failed restore.

        Returns:
            The error message, extended if the item could not be put back.
        """
        if path_exists(destination):
            logger.error("Restore left %s behind; previous item kept at %s", destination, backup)
            return f"{error} (previous item kept at {backup})"
        try:
            backup.rename(destination)
        except OSError as e:
            logger.error("Could not move %s back to %s: %s", backup, destination, e)
            return f"{error} (previous item kept at {backup})"
        return error

    def delete(self, entry: TrashEntry) -> TrashActionResult:
        """Permanently delete an entry.

        The metadata file goes first and the content follows in the same
        call, so a failure leaves at worst content without metadata, never
        metadata pointing at missing content. Content is removed even when
        the metadata file was already gone.

        Args:
            entry: Entry to delete.

        Returns:
            TrashActionResult for the deletion.
        """
        target = entry.display_name

        try:
            entry.metadata_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to remove %s: %s", entry.metadata_path, e)
            return TrashActionResult(
                action=TrashAction.DELETE,
                target=target,
                success=False,
                error=str(e),
            )

        try:
            if path_exists(entry.content_path):
                remove_path(entry.content_path)
        except OSError as e:
            logger.warning("Removed metadata but not content %s: %s", entry.content_path, e)
            return TrashActionResult(
                action=TrashAction.DELETE,
                target=target,
                success=False,
                error=f"Trash info removed but content could not be deleted: {e}",
            )

        logger.info("Deleted %s", entry.content_path)
        return TrashActionResult(action=TrashAction.DELETE, target=target, success=True)

    def empty(self) -> TrashActionResult:
        """Remove everything in the trash.

        Both the files and info directories are removed recursively and
        recreated empty.

        Returns:
            TrashActionResult for the operation.
        """
        target = str(self._dirs.root)

        try:
            for directory in (self._dirs.files, self._dirs.info):
                if path_exists(directory):
                    remove_path(directory)
                directory.mkdir()
        except OSError as e:
            logger.warning("Failed to empty trash %s: %s", target, e)
            return TrashActionResult(
                action=TrashAction.EMPTY,
                target=target,
                success=False,
                error=str(e),
            )

        logger.info("Emptied trash %s", target)
        return TrashActionResult(action=TrashAction.EMPTY, target=target, success=True)

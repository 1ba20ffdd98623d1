"""Trash location discovery.

Resolves the trash directory triple (root, files, info) and creates any
missing directory in it. The home trash lives under the XDG data directory;
optionally, a volume-local ``.Trash-*`` directory found in the current
working directory's ancestry takes precedence.
"""

import logging
import os
from enum import Enum
from pathlib import Path

from trashtui.trash.models import TrashDirs

logger = logging.getLogger(__name__)

# Volume-local trash directories are named ".Trash-<uid>"
VOLUME_TRASH_PREFIX = ".Trash-"


class DiscoveryStrategy(str, Enum):
    """How the trash root is discovered.

    Attributes:
        HOME: Use the home trash only.
        VOLUME: Prefer a volume-local trash above the working directory,
            falling back to the home trash.
    """

    HOME = "home"
    VOLUME = "volume"


class TrashConfigError(Exception):
    """Raised when the trash location cannot be resolved or created."""


def get_home_trash_root() -> Path:
    """Get the home trash root.

    Returns:
        $XDG_DATA_HOME/Trash, or ~/.local/share/Trash when unset.

    Raises:
        TrashConfigError: If neither XDG_DATA_HOME nor HOME is available.
    """
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "Trash"

    home = os.environ.get("HOME")
    if not home:
        msg = "Cannot determine home directory: HOME is not set"
        raise TrashConfigError(msg)
    return Path(home) / ".local" / "share" / "Trash"


def find_volume_trash(start: Path) -> Path | None:
    """Search a directory and its ancestors for a volume-local trash.

    A candidate is a directory named ``.Trash-*`` containing both a
    ``files`` and an ``info`` subdirectory. The nearest ancestor wins.
    Within one directory the current user's ``.Trash-<uid>`` is preferred,
    then the first candidate in name order.

    Args:
        start: Directory to start searching from.

    Returns:
        Path to the volume trash root, or None if none was found.
    """
    own_name = f"{VOLUME_TRASH_PREFIX}{os.getuid()}" if hasattr(os, "getuid") else None

    for directory in (start, *start.parents):
        try:
            children = sorted(directory.iterdir())
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            continue

        candidates = [
            child
            for child in children
            if child.name.startswith(VOLUME_TRASH_PREFIX)
            and child.is_dir()
            and (child / "files").is_dir()
            and (child / "info").is_dir()
        ]
        if not candidates:
            continue

        for candidate in candidates:
            if candidate.name == own_name:
                return candidate
        return candidates[0]

    return None


def _ensure_trash_dir(path: Path) -> None:
    """Create a trash directory if missing and verify it is a directory.

    Raises:
        TrashConfigError: If the path is not a directory or cannot be created.
    """
    if not path.exists():
        try:
            path.mkdir(parents=True)
        except FileExistsError:
            pass
        except OSError as e:
            msg = f"Error creating {path}: {e}"
            logger.error(msg)
            raise TrashConfigError(msg) from e

    if not path.is_dir():
        msg = f"{path} is not a directory"
        logger.error(msg)
        raise TrashConfigError(msg)


def locate_trash(
    strategy: DiscoveryStrategy = DiscoveryStrategy.HOME,
    cwd: Path | None = None,
) -> TrashDirs:
    """Resolve the trash directories, creating any that are missing.

    Safe to call repeatedly: the same environment always yields the
    same triple.

    Args:
        strategy: Discovery strategy to apply.
        cwd: Starting directory for volume trash probing (defaults to the
            current working directory).

    Returns:
        TrashDirs for the resolved trash root.

    Raises:
        TrashConfigError: If the trash location cannot be resolved or a
            path in the triple exists but is not a directory.
    """
    root: Path | None = None

    if strategy == DiscoveryStrategy.VOLUME:
        root = find_volume_trash(cwd or Path.cwd())
        if root is not None:
            logger.info("Using volume trash at %s", root)

    if root is None:
        root = get_home_trash_root()

    dirs = TrashDirs.from_root(root)
    for path in (dirs.root, dirs.files, dirs.info):
        _ensure_trash_dir(path)

    return dirs

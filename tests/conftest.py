"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from urllib.parse import quote

import pytest
from trashtui.trash.models import TrashDirs

TrashItemFactory = Callable[..., Path]


@pytest.fixture
def trash_dirs(tmp_path: Path) -> TrashDirs:
    """Empty trash layout under a temporary directory."""
    dirs = TrashDirs.from_root(tmp_path / "Trash")
    dirs.files.mkdir(parents=True)
    dirs.info.mkdir()
    return dirs


@pytest.fixture
def make_trash_item(trash_dirs: TrashDirs, tmp_path: Path) -> TrashItemFactory:
    """Factory creating a trashed item (content plus .trashinfo file).

    Returns the metadata file path.
    """

    def _make(
        name: str,
        deleted: str = "2025-07-02T13:40:56",
        restore_dir: Path | None = None,
        directory: bool = False,
        content: str = "content",
    ) -> Path:
        original = (restore_dir or tmp_path / "restored") / name
        content_path = trash_dirs.files / name
        if directory:
            content_path.mkdir()
            (content_path / "inner.txt").write_text(content)
        else:
            content_path.write_text(content)

        metadata_path = trash_dirs.info / f"{name}.trashinfo"
        metadata_path.write_text(
            f"[Trash Info]\nPath={quote(str(original))}\nDeletionDate={deleted}\n",
            encoding="utf-8",
        )
        return metadata_path

    return _make


@pytest.fixture
def local_timezone() -> Iterator[Callable[[str], None]]:
    """Switch the process local timezone, restoring it afterwards."""
    original = os.environ.get("TZ")

    def _set(tz: str) -> None:
        os.environ["TZ"] = tz
        time.tzset()

    yield _set

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()

"""Parser for .trashinfo metadata files.

A metadata file is line-oriented text:

    [Trash Info]
    Path=/tmp/%D1%81%D0%B5%D0%B72/video.avi
    DeletionDate=2025-07-02T13:40:56

The header line is skipped without validation and anything after the
DeletionDate line is ignored.
"""

from datetime import datetime
from pathlib import Path
from urllib.parse import unquote

from trashtui.trash.locator import VOLUME_TRASH_PREFIX
from trashtui.trash.models import TrashDirs, TrashEntry

PATH_PREFIX = "Path="
DATE_PREFIX = "DeletionDate="
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


class TrashInfoParseError(Exception):
    """Raised when a metadata file cannot be turned into a TrashEntry."""


class AmbiguousDateTimeError(TrashInfoParseError):
    """Raised when a deletion date does not map to exactly one local instant."""


def _read_lines(metadata_path: Path) -> list[str]:
    try:
        text = metadata_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Error reading trash info file {metadata_path}: {e}"
        raise TrashInfoParseError(msg) from e
    return text.splitlines()


def _field(lines: list[str], index: int, prefix: str, metadata_path: Path) -> str:
    if index >= len(lines):
        msg = f"Missing {prefix} line in trash info file {metadata_path}"
        raise TrashInfoParseError(msg)

    line = lines[index]
    if not line.startswith(prefix):
        msg = f"Missing {prefix} prefix in trash info file {metadata_path}"
        raise TrashInfoParseError(msg)
    return line.removeprefix(prefix)


def decode_path(value: str) -> str:
    """Percent-decode a path value.

    Raises:
        TrashInfoParseError: If the decoded bytes are not valid UTF-8.
    """
    try:
        return unquote(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        msg = f"Failed to decode path {value!r}: {e}"
        raise TrashInfoParseError(msg) from e


def parse_deletion_date(value: str) -> datetime:
    """Parse a deletion date as naive local time and attach the local zone.

    Args:
        value: Date in YYYY-MM-DDTHH:MM:SS format, no zone or fraction.

    Returns:
        Timezone-aware datetime in the local zone.

    Raises:
        TrashInfoParseError: If the value does not match the format.
        AmbiguousDateTimeError: If the local time falls in a DST gap or
            overlap.
    """
    try:
        naive = datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        msg = f"Invalid date format in trash info file: {value!r}"
        raise TrashInfoParseError(msg) from e

    # Both folds agree only when the wall time names exactly one instant.
    earlier = naive.replace(fold=0).astimezone()
    later = naive.replace(fold=1).astimezone()
    if earlier.utcoffset() != later.utcoffset():
        msg = f"Ambiguous or invalid local datetime: {value}"
        raise AmbiguousDateTimeError(msg)
    return earlier


def parse_trash_info(metadata_path: Path, dirs: TrashDirs) -> TrashEntry:
    """Parse one metadata file into a TrashEntry.

    Args:
        metadata_path: Path to the .trashinfo file.
        dirs: Trash directories; content is looked up under ``dirs.files``.

    Returns:
        Fully populated TrashEntry.

    Raises:
        TrashInfoParseError: If any part of the file is missing or malformed.
    """
    lines = _read_lines(metadata_path)

    # lines[0] is the "[Trash Info]" header
    raw_path = _field(lines, 1, PATH_PREFIX, metadata_path)
    raw_date = _field(lines, 2, DATE_PREFIX, metadata_path)

    decoded = decode_path(raw_path)
    if not decoded:
        msg = f"Empty Path value in trash info file {metadata_path}"
        raise TrashInfoParseError(msg)

    restore_location = Path(decoded)
    if not restore_location.is_absolute():
        # Only volume trash may store paths relative to the volume top
        if not dirs.root.name.startswith(VOLUME_TRASH_PREFIX):
            msg = f"Relative Path value outside a volume trash in {metadata_path}"
            raise TrashInfoParseError(msg)
        restore_location = dirs.root.parent / restore_location

    display_name = restore_location.name
    if not display_name or display_name == "..":
        msg = f"Invalid or missing file name in trash info file {metadata_path}"
        raise TrashInfoParseError(msg)

    stem = metadata_path.stem
    if not stem:
        msg = f"Invalid info file name: {metadata_path}"
        raise TrashInfoParseError(msg)

    return TrashEntry(
        display_name=display_name,
        metadata_path=metadata_path,
        content_path=dirs.files / stem,
        restore_location=restore_location,
        deleted_at=parse_deletion_date(raw_date),
    )

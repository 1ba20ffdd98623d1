"""Trash catalog engine.

This module provides trash location discovery, metadata parsing, the
sortable catalog with its cursor, fuzzy search, and the restore/delete/empty
operations for the trash domain.
"""

from trashtui.trash.catalog import Catalog
from trashtui.trash.locator import DiscoveryStrategy, TrashConfigError, locate_trash
from trashtui.trash.models import DEFAULT_SORT_MODE, SortMode, TrashDirs, TrashEntry
from trashtui.trash.operator import TrashAction, TrashActionResult, TrashOperator
from trashtui.trash.parser import AmbiguousDateTimeError, TrashInfoParseError, parse_trash_info
from trashtui.trash.search import FilteredRow, filter_entries

__all__ = [
    "DEFAULT_SORT_MODE",
    "AmbiguousDateTimeError",
    "Catalog",
    "DiscoveryStrategy",
    "FilteredRow",
    "SortMode",
    "TrashAction",
    "TrashActionResult",
    "TrashConfigError",
    "TrashDirs",
    "TrashEntry",
    "TrashInfoParseError",
    "TrashOperator",
    "filter_entries",
    "locate_trash",
    "parse_trash_info",
]

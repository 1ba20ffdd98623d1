"""Utility modules for trashtui.

This module exports commonly used utility functions.
"""

from trashtui.utils.formatting import (
    console,
    create_entry_table,
    err_console,
    format_date,
    format_entry_row,
    highlight_name,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_entry_table",
    "err_console",
    "format_date",
    "format_entry_row",
    "highlight_name",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]

"""List command implementation.

Prints the trash contents non-interactively, optionally filtered by a
fuzzy query.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from trashtui.cli.types import open_trash, resolve_settings
from trashtui.trash.catalog import Catalog
from trashtui.trash.locator import DiscoveryStrategy
from trashtui.trash.models import SortMode
from trashtui.trash.search import FilteredRow, filter_entries
from trashtui.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_error,
    print_info,
)

app = typer.Typer(
    help="List items in the trash.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def list_entries(
    ctx: typer.Context,
    query: Annotated[
        str,
        typer.Option(
            "--filter",
            "-q",
            help="Fuzzy filter on item names; best matches first.",
        ),
    ] = "",
    sort: Annotated[
        SortMode | None,
        typer.Option(
            "--sort",
            "-s",
            help="Sort order.",
            case_sensitive=False,
        ),
    ] = None,
    discovery: Annotated[
        DiscoveryStrategy | None,
        typer.Option(
            "--discovery",
            help="Trash discovery: home or volume.",
            case_sensitive=False,
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Limit number of items to display.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List trashed items with their deletion dates.

    Examples:
        trashtui list                       # Newest deletions first
        trashtui list --sort name           # Alphabetical
        trashtui list --filter report       # Fuzzy search by name
        trashtui list --format json         # Output as JSON
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    settings = resolve_settings(sort, discovery)
    dirs = open_trash(settings.discovery)

    try:
        catalog = Catalog(dirs, sort_mode=settings.default_sort)
    except OSError as e:
        print_error(f"Cannot read trash {dirs.info}: {e}")
        raise typer.Exit(code=1) from e

    rows = filter_entries(catalog.entries, query)
    display_rows = rows[:limit] if limit else rows

    if output_format == OutputFormat.JSON:
        _print_json(display_rows)
        return

    if not rows:
        print_info("No matching items." if query else "Trash is empty.")
        return

    table = create_entry_table(title=f"Trash ({dirs.root})")
    for row in display_rows:
        table.add_row(*format_entry_row(row, settings.date_format))
    console.print(table)

    if limit and len(display_rows) < len(rows):
        console.print(
            f"[dim](showing {len(display_rows)} of {len(rows)}, limited to {limit})[/dim]"
        )


def _print_json(rows: list[FilteredRow]) -> None:
    """Display rows as JSON."""
    data = [
        {
            "name": row.entry.display_name,
            "restore_location": str(row.entry.restore_location),
            "deleted_at": row.entry.deleted_at.isoformat(),
            "metadata_path": str(row.entry.metadata_path),
            "content_path": str(row.entry.content_path),
            "matches": row.ranges,
        }
        for row in rows
    ]
    console.print_json(json.dumps(data))

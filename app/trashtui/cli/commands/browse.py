"""Browse command implementation.

Launches the interactive full-screen trash browser.
"""

from typing import Annotated

import typer

from trashtui.cli.types import open_trash, resolve_settings
from trashtui.core.state import AppState
from trashtui.trash.catalog import Catalog
from trashtui.trash.locator import DiscoveryStrategy
from trashtui.trash.models import SortMode
from trashtui.trash.operator import TrashOperator
from trashtui.utils.formatting import print_error

app = typer.Typer(
    help="Browse the trash interactively.",
    invoke_without_command=True,
)


def run_browser(
    sort: SortMode | None = None,
    discovery: DiscoveryStrategy | None = None,
) -> None:
    """Resolve the trash and run the browser until the user quits.

    Raises:
        typer.Exit: If the trash cannot be opened.
    """
    # Imported here so non-interactive commands don't load Textual
    from trashtui.ui.app import TrashBrowserApp

    settings = resolve_settings(sort, discovery)
    dirs = open_trash(settings.discovery)

    try:
        catalog = Catalog(dirs, sort_mode=settings.default_sort)
    except OSError as e:
        print_error(f"Cannot read trash {dirs.info}: {e}")
        raise typer.Exit(code=1) from e

    state = AppState(catalog, TrashOperator(dirs), sort_mode=settings.default_sort)
    TrashBrowserApp(state, date_format=settings.date_format).run()


@app.callback(invoke_without_command=True)
def browse(
    ctx: typer.Context,
    sort: Annotated[
        SortMode | None,
        typer.Option(
            "--sort",
            "-s",
            help="Initial sort order.",
            case_sensitive=False,
        ),
    ] = None,
    discovery: Annotated[
        DiscoveryStrategy | None,
        typer.Option(
            "--discovery",
            help="Trash discovery: home, or volume to prefer a .Trash-* above the cwd.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Open the interactive trash browser.

    Examples:
        trashtui browse                     # Newest deletions first
        trashtui browse --sort name         # Alphabetical
        trashtui browse --discovery volume  # Use the trash of this volume
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    run_browser(sort, discovery)

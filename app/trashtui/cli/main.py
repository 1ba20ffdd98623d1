"""Main CLI application entry point.

Defines the Typer application and global options. Running trashtui
without a subcommand opens the interactive browser.
"""

from typing import Annotated

import typer

from trashtui import __version__
from trashtui.cli.commands import browse, config, list_
from trashtui.core.logs import configure_logging

# Create main Typer app
app = typer.Typer(
    name="trashtui",
    help="Browse, restore, and delete items in the desktop trash.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"trashtui version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Write debug output to the log file.",
        ),
    ] = False,
) -> None:
    """trashtui - Browse the freedesktop.org trash from the terminal.

    Without a subcommand, opens the interactive browser.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        browse.run_browser()


# Register commands
app.add_typer(browse.app, name="browse")
app.add_typer(list_.app, name="list")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

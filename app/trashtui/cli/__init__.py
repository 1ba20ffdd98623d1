"""CLI package for trashtui.

This package contains the Typer application and all subcommands.
"""

from trashtui.cli.main import app

__all__ = ["app"]

"""CLI commands for trashtui.

This package contains all subcommand implementations.
"""

from trashtui.cli.commands import browse, config, list_

__all__ = ["browse", "config", "list_"]

"""Shared helpers for CLI commands.

This module provides startup steps used by several command modules:
merging the config file with command-line overrides and resolving the
trash location.
"""

import typer

from trashtui.core.config import ConfigError, TrashConfig, load_config_or_default
from trashtui.trash.locator import DiscoveryStrategy, TrashConfigError, locate_trash
from trashtui.trash.models import SortMode, TrashDirs
from trashtui.utils.formatting import print_error


def resolve_settings(
    sort: SortMode | None = None,
    discovery: DiscoveryStrategy | None = None,
) -> TrashConfig:
    """Load the config file and apply command-line overrides.

    Args:
        sort: Sort mode given on the command line, if any.
        discovery: Discovery strategy given on the command line, if any.

    Returns:
        Effective configuration.

    Raises:
        typer.Exit: If the config file is invalid.
    """
    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    overrides: dict[str, object] = {}
    if sort is not None:
        overrides["default_sort"] = sort
    if discovery is not None:
        overrides["discovery"] = discovery
    return config.model_copy(update=overrides)


def open_trash(discovery: DiscoveryStrategy) -> TrashDirs:
    """Resolve the trash directories or abort the command.

    Raises:
        typer.Exit: If the trash location cannot be resolved.
    """
    try:
        return locate_trash(discovery)
    except TrashConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

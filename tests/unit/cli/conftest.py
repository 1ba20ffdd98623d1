"""Fixtures for CLI tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def cli_env(tmp_path: Path) -> dict[str, str]:
    """Environment pointing every XDG directory into tmp_path.

    The home trash resolves to tmp_path / "Trash", the same location the
    trash_dirs fixture populates.
    """
    return {
        "HOME": str(tmp_path / "home"),
        "XDG_DATA_HOME": str(tmp_path),
        "XDG_CONFIG_HOME": str(tmp_path / "config"),
        "XDG_STATE_HOME": str(tmp_path / "state"),
    }


@pytest.fixture(autouse=True)
def no_log_file() -> Iterator[MagicMock]:
    """Keep CLI invocations from reconfiguring the package logger."""
    with patch("trashtui.cli.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Location of the config file under cli_env."""
    path = tmp_path / "config" / "trashtui" / "config.toml"
    path.parent.mkdir(parents=True)
    return path

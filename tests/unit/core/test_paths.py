"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from trashtui.core.paths import (
    APP_NAME,
    ensure_config_dir,
    ensure_state_dir,
    get_config_dir,
    get_config_path,
    get_log_path,
    get_state_dir,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_value_ignored(self) -> None:
        """An empty XDG_CONFIG_HOME falls back to the default."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestGetStateDir:
    """Tests for get_state_dir function."""

    def test_default_state_dir(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            result = get_state_dir()
            expected = Path.home() / ".local" / "state" / APP_NAME

        assert result == expected

    def test_respects_xdg_state_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_STATE_HOME": str(tmp_path)}):
            result = get_state_dir()

        assert result == tmp_path / APP_NAME


class TestFilePaths:
    """Tests for the file path helpers."""

    def test_file_names(self, tmp_path: Path) -> None:
        env = {"XDG_CONFIG_HOME": str(tmp_path / "c"), "XDG_STATE_HOME": str(tmp_path / "s")}
        with patch.dict(os.environ, env):
            assert get_config_path() == tmp_path / "c" / APP_NAME / "config.toml"
            assert get_theme_path() == tmp_path / "c" / APP_NAME / "theme.toml"
            assert get_log_path() == tmp_path / "s" / APP_NAME / "trashtui.log"


class TestEnsureDirs:
    """Tests for directory creation."""

    def test_creates_directories(self, tmp_path: Path) -> None:
        env = {"XDG_CONFIG_HOME": str(tmp_path / "c"), "XDG_STATE_HOME": str(tmp_path / "s")}
        with patch.dict(os.environ, env):
            config_dir = ensure_config_dir()
            state_dir = ensure_state_dir()

        assert config_dir.is_dir()
        assert state_dir.is_dir()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        (tmp_path / APP_NAME).mkdir()
        with patch.dict(os.environ, {"XDG_STATE_HOME": str(tmp_path)}):
            assert ensure_state_dir() == tmp_path / APP_NAME

    def test_permission_error(self, tmp_path: Path) -> None:
        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}),
            patch.object(Path, "mkdir", side_effect=PermissionError("nope")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_config_dir()

    def test_file_in_the_way(self, tmp_path: Path) -> None:
        (tmp_path / "blocker").write_text("x")
        with (
            patch.dict(os.environ, {"XDG_STATE_HOME": str(tmp_path / "blocker")}),
            pytest.raises(RuntimeError, match="Cannot create state directory"),
        ):
            ensure_state_dir()

"""Unit tests for the list command."""

from pathlib import Path

import pytest
from trashtui.cli.main import app
from trashtui.trash.models import TrashDirs
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def populated(trash_dirs: TrashDirs, make_trash_item) -> TrashDirs:
    """Trash with three items, deleted one day apart."""
    make_trash_item("report.pdf", deleted="2025-01-01T10:00:00")
    make_trash_item("notes.txt", deleted="2025-01-02T10:00:00")
    make_trash_item("photos", deleted="2025-01-03T10:00:00", directory=True)
    return trash_dirs


class TestListCommand:
    """Tests for trashtui list."""

    def test_empty_trash(self, cli_env: dict[str, str], trash_dirs: TrashDirs) -> None:
        result = runner.invoke(app, ["list"], env=cli_env)

        assert result.exit_code == 0
        assert "Trash is empty." in result.stdout

    def test_newest_first_by_default(
        self, cli_env: dict[str, str], populated: TrashDirs
    ) -> None:
        result = runner.invoke(app, ["list"], env=cli_env)

        assert result.exit_code == 0
        out = result.stdout
        assert out.index("photos") < out.index("notes.txt") < out.index("report.pdf")
        assert "2025-01-03 10:00:00" in out

    def test_sort_by_name(self, cli_env: dict[str, str], populated: TrashDirs) -> None:
        result = runner.invoke(app, ["list", "--sort", "name"], env=cli_env)

        assert result.exit_code == 0
        out = result.stdout
        assert out.index("notes.txt") < out.index("photos") < out.index("report.pdf")

    def test_sort_from_config(
        self, cli_env: dict[str, str], config_file: Path, populated: TrashDirs
    ) -> None:
        config_file.write_text('default_sort = "date-desc"\ndate_format = "%d.%m.%Y"\n')

        result = runner.invoke(app, ["list"], env=cli_env)

        assert result.exit_code == 0
        out = result.stdout
        assert out.index("report.pdf") < out.index("notes.txt") < out.index("photos")
        assert "01.01.2025" in out

    def test_filter(self, cli_env: dict[str, str], populated: TrashDirs) -> None:
        result = runner.invoke(app, ["list", "--filter", "rep"], env=cli_env)

        assert result.exit_code == 0
        assert "report.pdf" in result.stdout
        assert "notes.txt" not in result.stdout
        assert "photos" not in result.stdout

    def test_filter_without_matches(
        self, cli_env: dict[str, str], populated: TrashDirs
    ) -> None:
        result = runner.invoke(app, ["list", "-q", "zzz"], env=cli_env)

        assert result.exit_code == 0
        assert "No matching items." in result.stdout

    def test_limit(self, cli_env: dict[str, str], populated: TrashDirs) -> None:
        result = runner.invoke(app, ["list", "--limit", "1"], env=cli_env)

        assert result.exit_code == 0
        assert "photos" in result.stdout
        assert "report.pdf" not in result.stdout
        assert "showing 1 of 3" in result.stdout

    def test_json_output(self, cli_env: dict[str, str], populated: TrashDirs) -> None:
        result = runner.invoke(app, ["list", "--format", "json", "-q", "note"], env=cli_env)

        assert result.exit_code == 0
        assert '"name": "notes.txt"' in result.stdout
        assert '"deleted_at": "2025-01-02T10:00:00' in result.stdout
        assert '"matches"' in result.stdout
        assert "report.pdf" not in result.stdout

    def test_json_empty(self, cli_env: dict[str, str], trash_dirs: TrashDirs) -> None:
        result = runner.invoke(app, ["list", "--format", "json"], env=cli_env)

        assert result.exit_code == 0
        assert result.stdout.strip() == "[]"

    def test_ignores_unparseable_metadata(
        self, cli_env: dict[str, str], populated: TrashDirs
    ) -> None:
        (populated.info / "zebra.txt.trashinfo").write_text("[Trash Info]\nPath=/tmp/zebra.txt\n")

        result = runner.invoke(app, ["list"], env=cli_env)

        assert result.exit_code == 0
        assert "zebra" not in result.stdout
        assert "report.pdf" in result.stdout

    def test_invalid_config(self, cli_env: dict[str, str], config_file: Path) -> None:
        config_file.write_text("default_sort = [\n")

        result = runner.invoke(app, ["list"], env=cli_env)

        assert result.exit_code == 1
        assert "Invalid TOML syntax" in result.output

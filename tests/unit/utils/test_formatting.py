"""Unit tests for Rich formatting helpers."""

from datetime import datetime
from pathlib import Path

import pytest
from trashtui.trash.models import TrashEntry
from trashtui.trash.search import FilteredRow
from trashtui.utils.formatting import (
    create_entry_table,
    format_date,
    format_entry_row,
    highlight_name,
    print_error,
    print_info,
    print_success,
    print_warning,
)


@pytest.fixture
def entry(tmp_path: Path) -> TrashEntry:
    return TrashEntry(
        display_name="report.pdf",
        metadata_path=tmp_path / "info" / "report.pdf.trashinfo",
        content_path=tmp_path / "files" / "report.pdf",
        restore_location=tmp_path / "report.pdf",
        deleted_at=datetime(2025, 7, 2, 13, 40, 56).astimezone(),
    )


class TestHighlightName:
    """Tests for highlight_name."""

    def test_no_ranges(self) -> None:
        text = highlight_name("report.pdf", None)
        assert text.plain == "report.pdf"
        assert text.spans == []

    def test_ranges_styled(self) -> None:
        text = highlight_name("report.pdf", [(0, 3), (7, 8)])

        assert [(s.start, s.end, s.style) for s in text.spans] == [
            (0, 3, "match"),
            (7, 8, "match"),
        ]


class TestEntryRows:
    """Tests for date and row formatting."""

    def test_format_date_default(self) -> None:
        assert format_date(datetime(2025, 7, 2, 13, 40, 56)) == "2025-07-02 13:40:56"

    def test_format_date_custom(self) -> None:
        assert format_date(datetime(2025, 7, 2, 13, 40, 56), "%d/%m") == "02/07"

    def test_format_entry_row(self, entry: TrashEntry) -> None:
        name, date = format_entry_row(FilteredRow(entry=entry, ranges=[(0, 1)]))

        assert name.plain == "report.pdf"
        assert name.spans[0].style == "match"
        assert date == "2025-07-02 13:40:56"

    def test_create_entry_table(self) -> None:
        table = create_entry_table(title="Trash", date_width=10)

        assert [column.header for column in table.columns] == ["Name", "Deleted"]
        assert table.columns[1].width == 10
        assert table.title == "Trash"


class TestPrintHelpers:
    """Tests for the message printers."""

    def test_info_and_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_info("Trash is empty.")
        print_success("Done")

        out = capsys.readouterr().out
        assert "Trash is empty." in out
        assert "Done" in out

    def test_error_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("boom")
        assert "Error: boom" in capsys.readouterr().err

    def test_warning_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_warning("careful")
        assert "Warning: careful" in capsys.readouterr().err

    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("Invalid value [type=enum]")
        assert "[type=enum]" in capsys.readouterr().err

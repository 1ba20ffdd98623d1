"""Unit tests for the browser renderables."""

from io import StringIO

import pytest
from rich.console import Console, RenderableType
from trashtui.core.state import AppState, InputMode, Message, PendingAction
from trashtui.core.theme import ThemeColors, get_rich_theme
from trashtui.trash.catalog import Catalog
from trashtui.trash.models import TrashDirs
from trashtui.trash.operator import TrashOperator
from trashtui.ui.render import (
    CONFIRM_PROMPTS,
    TITLE,
    ListViewport,
    render_dialog,
    render_footer,
    render_list,
    render_message,
    render_search,
    viewport_height_for,
)


def _render(renderable: RenderableType, width: int = 80) -> str:
    output = StringIO()
    console = Console(
        file=output,
        width=width,
        theme=get_rich_theme(ThemeColors()),
        color_system=None,
    )
    console.print(renderable)
    return output.getvalue()


def _state(dirs: TrashDirs, viewport_height: int = 5) -> AppState:
    return AppState(Catalog(dirs, viewport_height=viewport_height), TrashOperator(dirs))


class TestListViewport:
    """Tests for ListViewport scrolling."""

    def test_starts_at_top(self) -> None:
        assert ListViewport().window(10, 4, 0) == range(0, 4)

    def test_scrolls_down_only_when_needed(self) -> None:
        viewport = ListViewport()
        assert viewport.window(10, 4, 3) == range(0, 4)
        assert viewport.window(10, 4, 4) == range(1, 5)
        assert viewport.window(10, 4, 9) == range(6, 10)

    def test_scrolls_up_to_cursor(self) -> None:
        viewport = ListViewport()
        viewport.window(10, 4, 9)
        assert viewport.window(10, 4, 7) == range(6, 10)
        assert viewport.window(10, 4, 2) == range(2, 6)

    def test_wrap_to_top(self) -> None:
        viewport = ListViewport()
        viewport.window(10, 4, 9)
        assert viewport.window(10, 4, 0) == range(0, 4)

    def test_shrinking_list_clamps_offset(self) -> None:
        viewport = ListViewport()
        viewport.window(10, 4, 9)
        assert viewport.window(3, 4, None) == range(0, 3)

    def test_empty(self) -> None:
        assert ListViewport().window(0, 4, None) == range(0, 0)


class TestViewportHeight:
    """Tests for viewport_height_for."""

    @pytest.mark.parametrize(("list_height", "expected"), [(20, 17), (4, 1), (2, 1), (0, 1)])
    def test_heights(self, list_height: int, expected: int) -> None:
        assert viewport_height_for(list_height) == expected


class TestRenderList:
    """Tests for render_list."""

    def test_empty_trash(self, trash_dirs: TrashDirs) -> None:
        output = _render(render_list(_state(trash_dirs), ListViewport()))

        assert "Trash is empty" in output
        assert TITLE in output

    def test_marks_selected_row(self, trash_dirs: TrashDirs, make_trash_item) -> None:
        make_trash_item("older.txt", deleted="2025-01-01T10:00:00")
        make_trash_item("newer.txt", deleted="2025-01-02T10:00:00")
        state = _state(trash_dirs)

        output = _render(render_list(state, ListViewport()))

        assert ">> newer.txt" in output
        assert "   older.txt" in output
        assert "2025-01-02 10:00:00" in output
        assert "1/2" in output

    def test_date_format(self, trash_dirs: TrashDirs, make_trash_item) -> None:
        make_trash_item("a.txt", deleted="2025-07-02T13:40:56")

        output = _render(render_list(_state(trash_dirs), ListViewport(), "%d.%m.%Y"))

        assert "02.07.2025" in output

    def test_only_viewport_rows_rendered(self, trash_dirs: TrashDirs, make_trash_item) -> None:
        for i in range(6):
            make_trash_item(f"item{i}", deleted=f"2025-01-0{i + 1}T10:00:00")
        state = _state(trash_dirs, viewport_height=2)

        output = _render(render_list(state, ListViewport()))

        assert "item5" in output
        assert "item4" in output
        assert "item3" not in output

    def test_filtered_view(self, trash_dirs: TrashDirs, make_trash_item) -> None:
        make_trash_item("report.pdf", deleted="2025-01-01T10:00:00")
        make_trash_item("notes.txt", deleted="2025-01-02T10:00:00")
        state = _state(trash_dirs)
        for key in ("f", "r", "e", "p"):
            state.handle_key(key)

        output = _render(render_list(state, ListViewport()))

        assert ">> report.pdf" in output
        assert "notes.txt" not in output
        assert "1/1" in output

    def test_hidden_selection_position(self, trash_dirs: TrashDirs, make_trash_item) -> None:
        make_trash_item("a.txt")
        state = _state(trash_dirs)
        for key in ("f", "z"):
            state.handle_key(key)

        output = _render(render_list(state, ListViewport()))

        assert "-/0" in output
        assert ">>" not in output


class TestRenderParts:
    """Tests for the smaller renderables."""

    def test_search_shows_query(self) -> None:
        assert "report" in _render(render_search("report"))

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (InputMode.BROWSING, "empty trash"),
            (InputMode.FILTERING, "apply filter"),
            (InputMode.CHOOSING_SORT, "Sort by:"),
        ],
    )
    def test_footer_per_mode(self, mode: InputMode, expected: str) -> None:
        assert expected in _render(render_footer(mode), width=120)

    def test_sort_footer_lists_keys(self) -> None:
        output = _render(render_footer(InputMode.CHOOSING_SORT), width=120)
        assert "N - name descending" in output
        assert "D - date descending" in output

    @pytest.mark.parametrize("pending", list(PendingAction))
    def test_dialog_prompts(self, pending: PendingAction) -> None:
        output = _render(render_dialog(pending))
        assert CONFIRM_PROMPTS[pending] in output
        assert "Confirm" in output

    def test_override_prompt(self) -> None:
        assert "Override existing file?" in _render(render_dialog(PendingAction.OVERRIDE))

    def test_message(self) -> None:
        assert "Trash is already empty" in _render(
            render_message(Message.info("Trash is already empty"))
        )
        assert "Error reading trash" in _render(render_message(Message.error("Error reading trash")))

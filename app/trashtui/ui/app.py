"""Textual application hosting the trash browser.

The app only translates terminal events into AppState calls and redraws
the widgets from the state afterwards.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from trashtui.core.config import DEFAULT_DATE_FORMAT
from trashtui.core.state import AppState, InputMode
from trashtui.core.theme import get_theme
from trashtui.ui.render import (
    ListViewport,
    render_dialog,
    render_footer,
    render_list,
    render_message,
    render_search,
    viewport_height_for,
)


def key_name(event: events.Key) -> str:
    """Map a Textual key event to the key string AppState expects."""
    if event.is_printable and event.character:
        return event.character
    return event.key


class TrashBrowserApp(App[None]):
    """Full-screen trash browser."""

    CSS = """
    #message {
        dock: top;
        height: auto;
        display: none;
    }
    #search {
        height: 3;
        display: none;
    }
    #list {
        height: 1fr;
    }
    #dialog {
        dock: bottom;
        height: auto;
        display: none;
    }
    #footer {
        dock: bottom;
        height: 1;
    }
    """

    def __init__(self, state: AppState, date_format: str = DEFAULT_DATE_FORMAT) -> None:
        super().__init__()
        # Renderables use the named styles of the trashtui theme
        self.console.push_theme(get_theme())
        self.state = state
        self.date_format = date_format
        self.viewport = ListViewport()

    def compose(self) -> ComposeResult:
        yield Static(id="message")
        yield Static(id="search")
        yield Static(id="list")
        yield Static(id="footer")
        yield Static(id="dialog")

    def on_mount(self) -> None:
        self.call_after_refresh(self._sync_viewport)
        self.redraw()

    def on_resize(self, event: events.Resize) -> None:
        self.call_after_refresh(self._sync_viewport)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if self.state.handle_key(key_name(event)):
            self.exit()
            return
        self.redraw()
        # The search box changes the list height
        self.call_after_refresh(self._sync_viewport)

    def _sync_viewport(self) -> None:
        height = viewport_height_for(self.query_one("#list", Static).size.height)
        if height != self.state.catalog.viewport_height:
            self.state.handle_resize(height)
            self.redraw()

    def redraw(self) -> None:
        """Update every widget from the current state."""
        state = self.state

        search = self.query_one("#search", Static)
        search.display = state.mode == InputMode.FILTERING
        if search.display:
            search.update(render_search(state.query))

        self.query_one("#list", Static).update(
            render_list(state, self.viewport, self.date_format)
        )
        self.query_one("#footer", Static).update(render_footer(state.mode))

        dialog = self.query_one("#dialog", Static)
        dialog.display = state.pending is not None
        if state.pending is not None:
            dialog.update(render_dialog(state.pending))

        message = self.query_one("#message", Static)
        message.display = state.message is not None
        if state.message is not None:
            message.update(render_message(state.message))

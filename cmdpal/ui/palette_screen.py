"""
Command Palette Screen - modal overlay for the palette presenter.

Draws the presenter's rows (section headers, highlighted labels, shortcut
badges, recent marker) and forwards keys, hover and clicks back to it.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Input, ListItem, ListView, Static

from cmdpal.commands import CommandRegistry
from cmdpal.keyboard import KeyboardHub
from cmdpal.presenter import PalettePresenter, PaletteRow
from cmdpal.recency import RecencyStore

logger = logging.getLogger(__name__)
key_logger = logging.getLogger("key_events")

MATCH_STYLE = "bold #C9A84C"


def render_label(row: PaletteRow) -> Text:
    """Label with matched characters emphasized."""
    text = Text()
    for segment in row.label:
        text.append(segment.text, style=MATCH_STYLE if segment.matched else "")
    return text


def render_row(row: PaletteRow) -> Text:
    text = render_label(row)
    if row.command.description:
        text.append(f"  {row.command.description}", style="dim")
    if row.command.shortcut:
        text.append("  ")
        text.append(" ".join(f"[{key}]" for key in row.command.shortcut), style="dim bold")
    if row.recent:
        text.append("  ⏱", style="dim")
    return text


class PaletteResultWidget(ListItem):
    """Widget for a single palette candidate."""

    DEFAULT_CSS = """
    PaletteResultWidget {
        height: auto;
        padding: 0 1;
    }

    PaletteResultWidget .palette-section {
        color: $text-muted;
        text-style: bold;
    }
    """

    class Hovered(Message):
        """Posted when the mouse moves over a candidate."""

        def __init__(self, row_index: int):
            super().__init__()
            self.row_index = row_index

    def __init__(self, row: PaletteRow, **kwargs):
        super().__init__(**kwargs)
        self.row = row

    def compose(self) -> ComposeResult:
        if self.row.section:
            yield Static(self.row.section.upper(), classes="palette-section")
        yield Static(render_row(self.row), classes="palette-row")

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.row.index))


class CommandPaletteScreen(ModalScreen[None]):
    """
    Command palette modal overlay.

    Dismisses itself when the presenter signals close (a command ran, or
    Escape was pressed).
    """

    CSS = """
    CommandPaletteScreen {
        align: center top;
        padding-top: 5;
    }

    #palette-container {
        width: 80;
        height: auto;
        max-height: 30;
        background: $surface;
        border: solid $primary;
    }

    #palette-input {
        width: 100%;
        border: none;
        border-bottom: solid $primary-darken-1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #palette-results {
        height: auto;
        max-height: 20;
        min-height: 3;
        padding: 0;
    }

    #palette-empty {
        padding: 1 2;
        color: $text-muted;
    }

    #palette-hints {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        commands: CommandRegistry | Callable[[], CommandRegistry],
        recency: RecencyStore,
        keyboard: KeyboardHub,
        initial_query: str = "",
        schedule: Optional[Callable[[Awaitable[Any]], object]] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.initial_query = initial_query
        self.keyboard = keyboard
        self.presenter = PalettePresenter(
            commands,
            recency,
            keyboard=keyboard,
            on_state_update=self._on_state_update,
            on_close=self._on_presenter_close,
            schedule=schedule,
        )
        self._rendered_key: Optional[tuple[str, tuple[str, ...]]] = None

    def compose(self) -> ComposeResult:
        with Vertical(id="palette-container"):
            yield Input(placeholder="Search commands, pages, actions...", id="palette-input")
            yield ListView(id="palette-results")
            yield Static("", id="palette-empty")
            yield Static("↑↓ Navigate │ Enter Select │ Esc Close", id="palette-hints")

    def on_mount(self) -> None:
        input_widget = self.query_one("#palette-input", Input)
        if self.initial_query:
            input_widget.value = self.initial_query
        self.presenter.open(self.initial_query)
        input_widget.focus()

    def on_unmount(self) -> None:
        # Never leave the palette listener attached to the shared key stream
        self.presenter.on_close = None
        self.presenter.close()

    def _on_presenter_close(self) -> None:
        self.dismiss()

    def _on_state_update(self, presenter: PalettePresenter) -> None:
        if presenter.is_open:
            self.call_later(self._render_results)

    async def _render_results(self) -> None:
        if not self.presenter.is_open:
            return
        results_view = self.query_one("#palette-results", ListView)
        empty = self.query_one("#palette-empty", Static)
        rows = self.presenter.rows()
        # Highlight runs depend on the query as well as the candidates
        render_key = (self.presenter.state.query, tuple(row.command.id for row in rows))

        if render_key != self._rendered_key:
            self._rendered_key = render_key
            await results_view.clear()
            if rows:
                await results_view.extend(
                    PaletteResultWidget(row, id=f"palette-row-{row.index}") for row in rows
                )

        if rows:
            empty.update("")
            empty.display = False
            results_view.index = self.presenter.state.active_index
        else:
            empty.update(f"No results for “{self.presenter.state.query}”")
            empty.display = True

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "palette-input":
            return
        self.presenter.type(event.value)

    async def on_key(self, event: events.Key) -> None:
        """Offer keys to the shared key stream; the palette listener is on top."""
        if self.keyboard.dispatch(event.key):
            event.stop()
            event.prevent_default()
        else:
            key_logger.info("CommandPaletteScreen.on_key: unhandled key=%s", event.key)

    def on_palette_result_widget_hovered(self, message: PaletteResultWidget.Hovered) -> None:
        self.presenter.hover(message.row_index)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, PaletteResultWidget):
            self.presenter.click(event.item.row.index)

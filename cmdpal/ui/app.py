"""
Demo admin shell for the command palette.

The app plays the host: it owns the shared key stream, the Ctrl+K / "/"
openers and the "g d" style page shortcuts, and it "navigates" by showing
the current route.
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Static

from cmdpal.catalog import admin_shortcuts, build_admin_commands
from cmdpal.commands import CommandRegistry
from cmdpal.config.settings import get_state_path
from cmdpal.keyboard import KeyboardHub, ShortcutMap
from cmdpal.recency import RecencyStore
from cmdpal.storage import JsonFileStorage, KeyValueStorage

from .palette_screen import CommandPaletteScreen

logger = logging.getLogger(__name__)


class PaletteApp(App[None]):
    """Admin shell hosting the command palette."""

    TITLE = "cmdpal"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #route {
        padding: 1 2;
        text-style: bold;
    }

    #hint {
        padding: 0 2;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        initial_query: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.route = "/dashboard"
        self.signed_out = False
        self.initial_query = initial_query
        self.recency = RecencyStore(storage if storage is not None else JsonFileStorage(get_state_path()))
        self.keyboard = KeyboardHub()
        self.shortcuts = ShortcutMap(admin_shortcuts(self.navigate, self.open_palette))
        self._route_label = Static(self.route, id="route")

    def compose(self) -> ComposeResult:
        yield self._route_label
        yield Static("Ctrl+K or / opens the command palette", id="hint")
        yield Footer()

    def on_mount(self) -> None:
        self.keyboard.attach(self.shortcuts)
        if self.initial_query is not None:
            self.open_palette(self.initial_query)

    def on_unmount(self) -> None:
        self.keyboard.detach(self.shortcuts)

    def build_commands(self) -> CommandRegistry:
        return build_admin_commands(self.navigate, logout=self.logout)

    @property
    def palette_open(self) -> bool:
        return isinstance(self.screen, CommandPaletteScreen)

    def open_palette(self, query: str = "") -> None:
        if self.palette_open:
            return
        self.push_screen(
            CommandPaletteScreen(
                self.build_commands,
                self.recency,
                self.keyboard,
                initial_query=query,
                schedule=self.run_worker,
            )
        )

    def navigate(self, route: str) -> None:
        logger.info("Navigate to %s", route)
        self.route = route
        # The palette screen may be on top; update the base screen widget directly
        self._route_label.update(route)

    def logout(self) -> None:
        self.signed_out = True
        self.navigate("/login")

    async def on_key(self, event: events.Key) -> None:
        # The palette screen feeds the key stream itself while it is open
        if self.palette_open:
            return
        if self.keyboard.dispatch(event.key):
            event.stop()
            event.prevent_default()

"""
Presenter for the command palette.

Ties the engine together for a host UI: ranks commands as the query
changes, feeds input events through the navigation state machine, carries
out the resulting effects, and owns the keyboard listener for as long as
the palette is open.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .commands import Command, CommandRegistry
from .dispatcher import Dispatcher
from .fuzzy import Segment, highlight
from .keyboard import KeyboardHub
from .navigation import (
    ArrowDown,
    ArrowUp,
    Click,
    Close,
    Dispatch,
    Enter,
    Escape,
    Event,
    MouseEnter,
    Open,
    PaletteState,
    Refresh,
    Type,
    transition,
)
from .ranking import RankedCommands, rank
from .recency import RecencyStore

logger = logging.getLogger(__name__)

RegistrySource = Union[CommandRegistry, Callable[[], CommandRegistry]]

# Keys the palette acts on while open; everything else is left to the host
KEY_EVENTS: dict[str, Callable[[], Event]] = {
    "up": ArrowUp,
    "ctrl+p": ArrowUp,
    "down": ArrowDown,
    "ctrl+n": ArrowDown,
    "enter": Enter,
    "escape": Escape,
}


@dataclass(frozen=True)
class PaletteRow:
    """A single candidate as the UI should draw it."""

    index: int
    command: Command
    label: list[Segment] = field(default_factory=list)
    section: Optional[str] = None  # Header to draw above this row
    active: bool = False
    recent: bool = False


class PalettePresenter:
    """
    Handles command palette session logic.

    The host supplies the commands (a registry, or a factory called on each
    open), the recency store and the keyboard hub. ``on_state_update`` is
    called after every change; ``on_close`` when the palette closes by
    dispatch or Escape.
    """

    def __init__(
        self,
        commands: RegistrySource,
        recency: RecencyStore,
        keyboard: Optional[KeyboardHub] = None,
        on_state_update: Optional[Callable[[PalettePresenter], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        schedule: Optional[Callable[[Awaitable[Any]], object]] = None,
    ):
        self._commands = commands
        self.recency = recency
        self.keyboard = keyboard
        self.on_state_update = on_state_update
        self.on_close = on_close
        self.dispatcher = Dispatcher(recency, on_close=self.close, schedule=schedule)
        self._registry = CommandRegistry()
        self._recent_ids: list[str] = []
        self._ranked = RankedCommands()
        self._state = PaletteState()

    @property
    def state(self) -> PaletteState:
        """Get current state."""
        return self._state

    @property
    def ranked(self) -> RankedCommands:
        return self._ranked

    @property
    def candidates(self) -> tuple[Command, ...]:
        return self._ranked.candidates

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def active_command(self) -> Optional[Command]:
        if not self._ranked.candidates:
            return None
        return self._ranked.candidates[self._state.active_index]

    def _notify_update(self) -> None:
        if self.on_state_update:
            self.on_state_update(self)

    def _rank(self, query: str) -> RankedCommands:
        self._ranked = rank(self._registry, query, self._recent_ids)
        return self._ranked

    # Lifecycle -----------------------------------------------------

    def open(self, initial_query: str = "") -> None:
        """Open the palette, optionally pre-seeding the query."""
        self._registry = self._commands() if callable(self._commands) else self._commands
        self._recent_ids = self.recency.load()
        ranked = self._rank(initial_query)
        self._apply(Open(candidate_count=len(ranked), query=initial_query))
        if self.keyboard is not None:
            self.keyboard.attach(self.handle_key)
        logger.debug("Palette opened with %d candidates", len(ranked))

    def close(self) -> None:
        """Close the palette and discard the session."""
        if not self.is_open:
            return
        self._finish()

    def _finish(self) -> None:
        if self.keyboard is not None:
            self.keyboard.detach(self.handle_key)
        self._state = PaletteState()
        self._ranked = RankedCommands()
        self._notify_update()
        if self.on_close:
            self.on_close()

    # Input ---------------------------------------------------------

    def type(self, text: str) -> None:
        """Replace the query text."""
        if not self.is_open:
            return
        ranked = self._rank(text)
        self._apply(Type(text=text, candidate_count=len(ranked)))

    def refresh(self) -> None:
        """Re-read recency and re-rank the current query."""
        if not self.is_open:
            return
        self._recent_ids = self.recency.load()
        ranked = self._rank(self._state.query)
        self._apply(Refresh(candidate_count=len(ranked)))

    def handle_key(self, key: str) -> bool:
        """Keyboard listener. Returns True only for keys the palette acts on."""
        if not self.is_open:
            return False
        make_event = KEY_EVENTS.get(key)
        if make_event is None:
            return False
        self._apply(make_event())
        return True

    def hover(self, index: int) -> None:
        self._apply(MouseEnter(index))

    def click(self, index: int) -> None:
        self._apply(Click(index))

    def move_selection(self, delta: int) -> None:
        """Move selection up or down by ``delta`` rows."""
        event = ArrowDown() if delta > 0 else ArrowUp()
        for _ in range(abs(delta)):
            self._apply(event)

    def _apply(self, event: Event) -> None:
        result = transition(self._state, event)
        changed = result.state != self._state
        self._state = result.state

        if isinstance(result.effect, Dispatch):
            if changed:
                self._notify_update()
            self.dispatcher.execute(self._ranked.candidates[result.effect.index])
        elif isinstance(result.effect, Close):
            logger.debug("Palette dismissed")
            self._finish()
        elif changed or isinstance(event, Open):
            self._notify_update()

    # View ----------------------------------------------------------

    def rows(self) -> list[PaletteRow]:
        """Candidates with section headers, highlight runs and flags."""
        query = self._state.query
        recent = set() if query.strip() else set(self._recent_ids)
        return [
            PaletteRow(
                index=i,
                command=command,
                label=highlight(command.label, query),
                section=self._ranked.section_at(i),
                active=i == self._state.active_index,
                recent=command.id in recent,
            )
            for i, command in enumerate(self._ranked.candidates)
        ]

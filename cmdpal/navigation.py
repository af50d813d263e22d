"""
Keyboard/mouse navigation state machine for an open palette.

``transition`` is a pure function of the current state and one input event.
It never touches the keyboard, the recency store or any command; instead it
returns an effect (dispatch a candidate, close the palette) for the
controller to carry out.

Events carrying a candidate count (Open, Type, Refresh) expect the caller to
have re-ranked already, since candidates are derived from the query rather
than stored here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

__all__ = [
    "ArrowDown",
    "ArrowUp",
    "Click",
    "Close",
    "Dispatch",
    "Enter",
    "Escape",
    "MouseEnter",
    "Open",
    "PaletteState",
    "Refresh",
    "Transition",
    "Type",
    "transition",
]


@dataclass(frozen=True)
class PaletteState:
    """Ephemeral session state; discarded when the palette closes."""

    is_open: bool = False
    query: str = ""
    active_index: int = 0
    candidate_count: int = 0


# Events ---------------------------------------------------------------


@dataclass(frozen=True)
class Open:
    candidate_count: int
    query: str = ""


@dataclass(frozen=True)
class Type:
    text: str
    candidate_count: int


@dataclass(frozen=True)
class Refresh:
    candidate_count: int


@dataclass(frozen=True)
class ArrowUp:
    pass


@dataclass(frozen=True)
class ArrowDown:
    pass


@dataclass(frozen=True)
class Enter:
    pass


@dataclass(frozen=True)
class Escape:
    pass


@dataclass(frozen=True)
class MouseEnter:
    index: int


@dataclass(frozen=True)
class Click:
    index: int


Event = Union[Open, Type, Refresh, ArrowUp, ArrowDown, Enter, Escape, MouseEnter, Click]


# Effects --------------------------------------------------------------


@dataclass(frozen=True)
class Dispatch:
    """Execute the candidate at ``index``."""

    index: int


@dataclass(frozen=True)
class Close:
    """Close without executing anything."""


Effect = Union[Dispatch, Close]


@dataclass(frozen=True)
class Transition:
    state: PaletteState
    effect: Optional[Effect] = None


def _in_range(index: int, count: int) -> bool:
    return 0 <= index < count


def transition(state: PaletteState, event: Event) -> Transition:
    """Apply one input event to the palette state."""
    if isinstance(event, Open):
        return Transition(
            PaletteState(is_open=True, query=event.query, candidate_count=event.candidate_count)
        )

    if not state.is_open:
        return Transition(state)

    count = state.candidate_count

    if isinstance(event, Type):
        if event.text == state.query and event.candidate_count == count:
            return Transition(state)
        return Transition(
            replace(state, query=event.text, active_index=0, candidate_count=event.candidate_count)
        )

    if isinstance(event, Refresh):
        if event.candidate_count == count:
            return Transition(state)
        return Transition(replace(state, active_index=0, candidate_count=event.candidate_count))

    if isinstance(event, ArrowDown):
        if count == 0:
            return Transition(state)
        return Transition(replace(state, active_index=min(state.active_index + 1, count - 1)))

    if isinstance(event, ArrowUp):
        return Transition(replace(state, active_index=max(state.active_index - 1, 0)))

    if isinstance(event, Enter):
        if count == 0:
            return Transition(state)
        return Transition(state, Dispatch(state.active_index))

    if isinstance(event, Escape):
        return Transition(PaletteState(), Close())

    if isinstance(event, MouseEnter):
        if not _in_range(event.index, count):
            return Transition(state)
        return Transition(replace(state, active_index=event.index))

    if isinstance(event, Click):
        if not _in_range(event.index, count):
            return Transition(state)
        return Transition(state, Dispatch(event.index))

    raise TypeError(f"Unknown palette event: {event!r}")
